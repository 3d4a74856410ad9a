"""
WIGOS Station Identifier.

The canonical format is::

    WIGOSIdentifierSeries-IssuerOfIdentifier-IssueNumber-LocalIdentifier

Valid identifiers:

- WIGOSIdentifierSeries: 0
- IssuerOfIdentifier: 0-65534
- IssueNumber: 0-65534
- LocalIdentifier: up to 16 characters, no "-"

Example (SMHI Gunnarn): ``0-20000-0-02126``
"""

import re

from pydantic import field_validator

from weatherlog.models.base import ValueModel
from weatherlog.utils.text import split_fields

SEPARATOR = "-"
LOCAL_IDENTIFIER_MAX_LENGTH = 16

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Components are 32-bit signed integers
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'For input string: "{text}"')
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        raise ValueError(f'For input string: "{text}" is out of range')
    return value


class WigosStationIdentifier(ValueModel):
    """A validated, immutable WIGOS station identifier."""

    series: int
    issuer: int
    issue_number: int
    local_identifier: str

    @field_validator("series")
    @classmethod
    def validate_series(cls, v: int) -> int:
        """Only series 0 is defined."""
        if v != 0:
            raise ValueError("Series component of a WIGOS ID must be zero.")
        return v

    @field_validator("issuer", "issue_number")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Numeric components of a WIGOS ID cannot be negative.")
        return v

    @field_validator("local_identifier", mode="before")
    @classmethod
    def validate_local_identifier(cls, v):
        if v is None:
            raise ValueError("Local identifier cannot be null.")
        if isinstance(v, str) and (
            len(v) > LOCAL_IDENTIFIER_MAX_LENGTH
            or not v.strip()
            or SEPARATOR in v
        ):
            raise ValueError("Local identifier cannot be blank or contain hyphens.")
        return v

    @classmethod
    def parse(cls, wigos_id: str) -> "WigosStationIdentifier":
        """
        Parse the canonical string representation of an identifier.

        Args:
            wigos_id: The identifier string, e.g. "0-20000-0-ABCDE".

        Returns:
            A new WigosStationIdentifier instance.

        Raises:
            ValueError: If the string format is invalid or any component
                fails validation.
        """
        if wigos_id is None:
            raise ValueError("WIGOS ID string cannot be null.")

        parts = split_fields(wigos_id, SEPARATOR)
        if len(parts) != 4:
            raise ValueError(
                f"WIGOS ID string must have 4 parts separated by hyphens. Found: {len(parts)}"
            )

        try:
            series = _parse_int(parts[0])
            issuer = _parse_int(parts[1])
            issue_number = _parse_int(parts[2])
        except ValueError as e:
            raise ValueError(f"Failed to parse numeric part of the WIGOS ID: {wigos_id}") from e

        return cls(
            series=series,
            issuer=issuer,
            issue_number=issue_number,
            local_identifier=parts[3],
        )

    def __str__(self) -> str:
        return f"{self.series:d}-{self.issuer:d}-{self.issue_number:d}-{self.local_identifier}"
