"""Helpers for turning validation failures into user-facing messages."""

from pydantic import ValidationError


def describe_error(exc: ValueError) -> str:
    """
    Short, single-line description of a ValueError.

    Pydantic validation errors are reduced to their messages, without
    the field locations and documentation links.
    """
    if isinstance(exc, ValidationError):
        return "; ".join(
            err["msg"].removeprefix("Value error, ") for err in exc.errors()
        )
    return str(exc)
