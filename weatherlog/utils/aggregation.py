"""
Aggregation utilities for parsed weather logs.

Counts observations by validity class and finds reading maxima.
NaN readings never take part in a maximum.
"""

import math
from typing import Iterable

from weatherlog.models.wigos import WigosStationIdentifier
from weatherlog.schemas.report import LogSummary
from weatherlog.utils.log_parser import ParsingResult


def count_valid(result: ParsingResult) -> int:
    """Number of observations with all readings valid."""
    return sum(1 for obs in result.observations if obs.is_valid())


def count_partial(result: ParsingResult) -> int:
    """Number of observations with exactly one invalid reading."""
    return sum(1 for obs in result.observations if obs.is_partial())


def count_invalid(result: ParsingResult) -> int:
    """Number of observations with all readings invalid."""
    return sum(1 for obs in result.observations if obs.is_invalid())


def max_reading(values: Iterable[float]) -> float:
    """
    Maximum of the non-NaN values.

    Args:
        values: Readings, possibly containing NaN

    Returns:
        The largest real reading, or -inf if there is none

    Example:
        >>> max_reading([1.0, float("nan"), 3.5])
        3.5
        >>> max_reading([float("nan")])
        -inf
    """
    return max((v for v in values if not math.isnan(v)), default=-math.inf)


def max_temperature(result: ParsingResult) -> float:
    return max_reading(obs.temperature for obs in result.observations)


def max_humidity(result: ParsingResult) -> float:
    return max_reading(obs.humidity for obs in result.observations)


def summarize(station_id: WigosStationIdentifier, result: ParsingResult) -> LogSummary:
    """
    Build the report summary for one parsed log.

    Args:
        station_id: Station the log was parsed for
        result: Output of parse_log

    Returns:
        LogSummary with class counts, error count and maxima
    """
    return LogSummary(
        station_id=str(station_id),
        valid=count_valid(result),
        partial=count_partial(result),
        invalid=count_invalid(result),
        errors=len(result.errors),
        max_temperature=max_temperature(result),
        max_humidity=max_humidity(result),
    )
