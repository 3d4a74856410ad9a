"""
Tolerant parser for single-station weather logs.

The log format is one observation per line::

    ISO_TIMESTAMP,TEMPERATURE_CELSIUS,RELATIVE_HUMIDITY_PERCENT

Example::

    2025-08-07T10:00:00Z,22.5,58.3
    2025-08-07T11:00:00Z,NaN,60.1

Malformed lines never abort parsing. Each one is recorded as a
ParserError and the remaining lines are still processed.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from pydantic import ConfigDict

from weatherlog.models.base import ValueModel
from weatherlog.models.observation import Observation
from weatherlog.models.wigos import WigosStationIdentifier
from weatherlog.utils.logging_config import get_logger
from weatherlog.utils.text import split_fields

logger = get_logger(__name__)

FIELD_SEPARATOR = ","
PART_COUNT_MESSAGE = "Line does not contain exactly three parts."

_INSTANT = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)

_FLOAT = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.ASCII,
)


class ParserError(ValueModel):
    """A log line that could not be turned into an Observation."""

    line_number: int
    message: str
    line: str
    station_id: WigosStationIdentifier


class ParsingResult(ValueModel):
    """
    Outcome of one parse_log call.

    Both sequences keep input line order and are stored as tuples, so
    callers never share mutable state with the parser.
    """

    model_config = ConfigDict(frozen=True, strict=False)

    observations: Tuple[Observation, ...]
    errors: Tuple[ParserError, ...]


def parse_instant(text: str) -> datetime:
    """
    Parse a strict ISO-8601 instant such as ``2025-08-07T10:00:00Z``.

    Seconds and an explicit offset (``Z`` or ``+HH:MM``) are required.
    Fractions beyond microseconds are truncated. The result is in UTC.

    Raises:
        ValueError: If the text is not a valid instant.
    """
    match = _INSTANT.fullmatch(text)
    if match is None:
        raise ValueError(f"Text '{text}' could not be parsed as an ISO-8601 instant")

    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    offset = "+00:00" if match["offset"] == "Z" else match["offset"]
    try:
        parsed = datetime.fromisoformat(f"{match['date']}T{match['time']}.{fraction}{offset}")
    except ValueError as e:
        raise ValueError(f"Text '{text}' could not be parsed as an ISO-8601 instant: {e}") from e

    return parsed.astimezone(timezone.utc)


def parse_reading(text: str) -> float:
    """
    Parse a floating point reading.

    Accepts decimal literals with an optional exponent and the exact
    forms "NaN", "Infinity" and "-Infinity". Lower-case "nan"/"inf" and
    digit separators are rejected.
    """
    if not text:
        raise ValueError("empty String")
    if not _FLOAT.fullmatch(text):
        raise ValueError(f'For input string: "{text}"')
    return float(text)


def parse_line(station_id: WigosStationIdentifier, line: str) -> Observation:
    """
    Parse a single log line into an Observation.

    Raises:
        ValueError: If the line is malformed. The message describes
            the first problem found.
    """
    parts = split_fields(line, FIELD_SEPARATOR)
    if len(parts) != 3:
        raise ValueError(PART_COUNT_MESSAGE)

    timestamp = parse_instant(parts[0].strip())
    temperature = parse_reading(parts[1].strip())
    humidity = parse_reading(parts[2].strip())

    return Observation(
        station_id=station_id,
        timestamp=timestamp,
        temperature=temperature,
        humidity=humidity,
    )


def parse_log(station_id: WigosStationIdentifier, lines: Iterable[str]) -> ParsingResult:
    """
    Parse log lines into observations, collecting per-line errors.

    Lines are consumed once, in order, and numbered from 1. Every line
    ends up either as an Observation or as a ParserError, never both.

    Args:
        station_id: Station the whole log belongs to.
        lines: Log lines, e.g. a list or an open text file.

    Returns:
        ParsingResult with the successful observations and the errors.

    Raises:
        ValueError: If station_id or lines is None.
    """
    if station_id is None:
        raise ValueError("station_id can't be None")
    if lines is None:
        raise ValueError("lines can't be None")

    observations: List[Observation] = []
    errors: List[ParserError] = []

    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            observations.append(parse_line(station_id, line))
        except ValueError as e:
            logger.debug(f"Rejected line {line_number} for station {station_id}: {e}")
            errors.append(ParserError(
                line_number=line_number,
                message=str(e),
                line=line,
                station_id=station_id,
            ))

    logger.info(
        f"Parsed {line_number} line(s) for station {station_id}: "
        f"{len(observations)} observation(s), {len(errors)} error(s)"
    )

    return ParsingResult(observations=observations, errors=errors)
