"""
Base class for immutable domain values.

Domain values are validated once, at construction, and never change
afterwards.
"""

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """
    Frozen, strictly typed pydantic model.

    All domain value types should inherit from this class.
    """

    model_config = ConfigDict(frozen=True, strict=True)
