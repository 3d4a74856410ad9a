"""
Report schemas.

This module contains Pydantic schemas for log summaries and the
HTTP request/response bodies built from them.
"""

import math
from typing import List, Optional

from pydantic import ConfigDict, Field

from weatherlog.schemas.base import BaseSchema


class LogSummary(BaseSchema):
    """
    Statistics for one parsed station log.

    Maxima are -inf when no real reading exists for that field.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    station_id: str
    valid: int = Field(..., ge=0)
    partial: int = Field(..., ge=0)
    invalid: int = Field(..., ge=0)
    errors: int = Field(..., ge=0)
    max_temperature: float
    max_humidity: float


class StationIdentifierResponse(BaseSchema):
    """Components of a parsed WIGOS station identifier."""
    wigos_id: str = Field(..., description="Canonical identifier string")
    series: int
    issuer: int
    issue_number: int
    local_identifier: str


class ParserErrorResponse(BaseSchema):
    """A rejected log line."""
    line_number: int = Field(..., ge=1, description="1-based line position in the log")
    message: str
    line: str


class LogReportResponse(BaseSchema):
    """
    Report for an uploaded station log.

    Maxima are null when the log holds no real reading for that field.
    """
    station_id: str
    valid: int
    partial: int
    invalid: int
    errors: int
    max_temperature: Optional[float] = Field(None, description="Maximum temperature in Celsius")
    max_humidity: Optional[float] = Field(None, description="Maximum relative humidity in percent")
    parser_errors: List[ParserErrorResponse] = []

    @classmethod
    def from_summary(
        cls, summary: LogSummary, parser_errors: List[ParserErrorResponse]
    ) -> "LogReportResponse":
        """Build a JSON-safe report from a summary."""
        return cls(
            station_id=summary.station_id,
            valid=summary.valid,
            partial=summary.partial,
            invalid=summary.invalid,
            errors=summary.errors,
            max_temperature=_finite_or_none(summary.max_temperature),
            max_humidity=_finite_or_none(summary.max_humidity),
            parser_errors=parser_errors,
        )


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None
