"""
Station log router.

This module contains endpoints for validating WIGOS station identifiers
and for parsing uploaded station weather logs into reports.
"""

import io

from fastapi import APIRouter, Depends, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from weatherlog.config import settings
from weatherlog.models.wigos import WigosStationIdentifier
from weatherlog.schemas.report import (
    LogReportResponse,
    ParserErrorResponse,
    StationIdentifierResponse,
)
from weatherlog.utils.aggregation import summarize
from weatherlog.utils.errors import describe_error
from weatherlog.utils.log_parser import parse_log
from weatherlog.utils.logging_config import get_logger
from weatherlog.utils.text import iter_lines

logger = get_logger(__name__)

router = APIRouter(
    prefix="/stations",
    tags=["Station Logs"],
    responses={
        422: {"description": "Invalid station identifier"},
    },
)

limiter = Limiter(key_func=get_remote_address)


def get_station_identifier(wigos_id: str) -> WigosStationIdentifier:
    """Resolve the ``wigos_id`` path parameter into a validated identifier."""
    try:
        return WigosStationIdentifier.parse(wigos_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid station identifier: {describe_error(e)}"
        )


@router.get("/{wigos_id}", response_model=StationIdentifierResponse)
@limiter.limit(f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW}seconds")
async def get_station_identifier_details(
    request: Request,
    station_id: WigosStationIdentifier = Depends(get_station_identifier),
):
    """
    Validate a WIGOS station identifier and return its components.

    **Example:**
    ```
    GET /api/v1/stations/0-20000-0-02126
    ```
    """
    return StationIdentifierResponse(
        wigos_id=str(station_id),
        series=station_id.series,
        issuer=station_id.issuer,
        issue_number=station_id.issue_number,
        local_identifier=station_id.local_identifier,
    )


@router.post(
    "/{wigos_id}/logs",
    response_model=LogReportResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
@limiter.limit(f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW}seconds")
async def upload_station_log(
    request: Request,
    station_id: WigosStationIdentifier = Depends(get_station_identifier),
):
    """
    Parse a station weather log and return its report.

    The request body is the raw log, one observation per line:

    ```
    2025-08-07T10:00:00Z,22.5,58.3
    2025-08-07T11:00:00Z,NaN,60.1
    ```

    Malformed lines do not fail the request; they are listed in
    `parser_errors`.
    """
    body = await request.body()
    try:
        text = body.decode(settings.LOG_FILE_ENCODING)
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Log body must be {settings.LOG_FILE_ENCODING} encoded text"
        )

    result = parse_log(station_id, iter_lines(io.StringIO(text, newline=None)))
    summary = summarize(station_id, result)

    if result.errors:
        logger.warning(f"Station {station_id}: {len(result.errors)} log line(s) rejected")

    return LogReportResponse.from_summary(
        summary,
        [
            ParserErrorResponse(line_number=e.line_number, message=e.message, line=e.line)
            for e in result.errors
        ],
    )
