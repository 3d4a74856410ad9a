"""
Print statistics for a single-station weather log file.

The station identifier is taken from the file name unless given
explicitly, e.g. ``0-20000-0-02513.csv`` belongs to station
``0-20000-0-02513``.

Usage:
    weatherlog-report
    weatherlog-report data/0-20000-0-02126.csv
    weatherlog-report readings.csv --station 0-20000-0-02126 --show-errors
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from weatherlog.config import settings
from weatherlog.models.wigos import WigosStationIdentifier
from weatherlog.schemas.report import LogSummary
from weatherlog.utils.aggregation import summarize
from weatherlog.utils.errors import describe_error
from weatherlog.utils.log_parser import ParserError, ParsingResult, parse_log
from weatherlog.utils.logging_config import setup_logging, get_logger
from weatherlog.utils.text import iter_lines

logger = get_logger(__name__)

EXIT_IO_ERROR = 1
EXIT_BAD_STATION = 2


def station_from_path(path: Path) -> str:
    """Station identifier string encoded in a log file name."""
    return path.name.replace(".csv", "")


def read_log(station_id: WigosStationIdentifier, path: Path) -> ParsingResult:
    """
    Parse a log file line by line.

    The file is streamed, not loaded up front, and is closed before
    this returns.
    """
    with open(path, encoding=settings.LOG_FILE_ENCODING) as log_file:
        return parse_log(station_id, iter_lines(log_file))


def format_report(summary: LogSummary) -> str:
    """Render the fixed-layout text report."""
    return (
        f"Valid:   {summary.valid}\n"
        f"Partial: {summary.partial}\n"
        f"Invalid: {summary.invalid}\n"
        f"Errors:  {summary.errors}\n"
        "\n"
        f"Max Temp:     {summary.max_temperature:.2f}\n"
        f"Max Humidity: {summary.max_humidity:.2f}"
    )


def format_errors(errors: List[ParserError]) -> str:
    return "\n".join(f"line {e.line_number}: {e.message}" for e in errors)


def run_report(path: Path, station: Optional[str] = None, show_errors: bool = False) -> int:
    """
    Parse one log file and print its report.

    Returns:
        Process exit status, 0 on success
    """
    try:
        station_id = WigosStationIdentifier.parse(station or station_from_path(path))
    except ValueError as e:
        print(f"Invalid station identifier: {describe_error(e)}", file=sys.stderr)
        return EXIT_BAD_STATION

    try:
        result = read_log(station_id, path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Reading {path} failed", exc_info=True)
        print(f"An error occurred: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print(format_report(summarize(station_id, result)))

    if show_errors and result.errors:
        print()
        print(format_errors(list(result.errors)))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Print validity statistics for a station weather log"
    )
    parser.add_argument(
        'path',
        nargs='?',
        type=Path,
        default=Path(settings.DEFAULT_LOG_FILE),
        help=f'Log file to read (default: {settings.DEFAULT_LOG_FILE})'
    )
    parser.add_argument(
        '--station',
        type=str,
        help='WIGOS station identifier (default: taken from the file name)'
    )
    parser.add_argument(
        '--show-errors',
        action='store_true',
        help='List every rejected line after the report'
    )

    args = parser.parse_args(argv)

    # Log to stderr so the report on stdout stays machine-readable
    setup_logging(stream=sys.stderr)

    return run_report(args.path, station=args.station, show_errors=args.show_errors)


if __name__ == "__main__":
    sys.exit(main())
