# Pydantic schemas package

from weatherlog.schemas.base import BaseSchema
from weatherlog.schemas.report import (
    LogSummary, LogReportResponse, ParserErrorResponse, StationIdentifierResponse
)

__all__ = [
    "BaseSchema",
    "LogSummary", "LogReportResponse", "ParserErrorResponse", "StationIdentifierResponse",
]
