"""Splitting helpers shared by the identifier and log line parsers."""

from typing import Iterator, List, TextIO


def split_fields(text: str, separator: str) -> List[str]:
    """
    Split text on a literal separator, dropping trailing empty fields.

    ``"a,b,c,"`` and ``"a,b,c,,"`` both give ``["a", "b", "c"]``. A text
    made only of separators gives ``[""]``.
    """
    parts = text.split(separator)
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def iter_lines(stream: TextIO) -> Iterator[str]:
    """
    Yield the lines of a text stream without their terminators.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line, provided the stream
    was opened with universal newlines (the default for ``open`` and
    ``io.StringIO(text, newline=None)``).
    """
    for line in stream:
        yield line.rstrip("\n")
