"""Splitting of streams into raw and logical lines.

A raw line is one line of the stream without its `\\r?\\n` terminator.
A logical line is one or more raw lines joined together: a raw line ending in a backslash
continues onto the next one, the backslash itself being replaced with a newline.
"""

import io
import logging
import re
from collections.abc import Iterable, Iterator
from typing import IO

_log = logging.getLogger(__name__)

RE_TERMINATOR = re.compile(r"\r?\n\Z")

Source = IO[bytes] | IO[str] | Iterable[str] | Iterable[bytes]


def raw_lines(file: Source, encoding: str = "utf-8") -> Iterator[str]:
    """Split a stream into raw lines.

    Only `\\n` and `\\r\\n` terminate a line; a lone `\\r` is kept as part of the line.

    Args:
        file: A binary stream, a text stream or any iterable of lines.
        encoding: How to decode binary streams. Defaults to UTF-8.

    Yields:
        Each line of the stream with its terminator removed.

    Raises:
        TypeError: The file is a str or bytes object rather than a stream.
    """

    if isinstance(file, (str, bytes)):
        raise TypeError(
            f"expected a stream or an iterable of lines, not {type(file).__name__} "
            "(use loads() to parse a string)"
        )

    if isinstance(file, (io.RawIOBase, io.BufferedIOBase)):
        # Only split on '\n', and leave '\r' alone so the terminator regex can handle it.
        wrapper = io.TextIOWrapper(file, encoding=encoding, newline="\n")

        try:
            for line in wrapper:
                yield RE_TERMINATOR.sub("", line)
        finally:
            # Don't close the underlying stream, the caller owns it.
            wrapper.detach()

        return

    for line in file:
        if isinstance(line, bytes):
            line = line.decode(encoding)

        yield RE_TERMINATOR.sub("", line)


def join_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Join raw lines into logical lines.

    Logical lines that are blank (whitespace only) are skipped.
    A continuation left dangling at the end of the lines is dropped.

    Args:
        lines: The raw lines.

    Yields:
        Tuples of the (1-based) number of the raw line where the logical line starts,
        and the logical line itself.
    """

    parts: list[str] = []
    start = 0

    for number, line in enumerate(lines, start=1):
        if not parts:
            start = number

        if line.endswith("\\"):
            parts.append(line[:-1] + "\n")
            continue

        parts.append(line)
        logical = "".join(parts)
        parts.clear()

        if logical.strip():
            yield start, logical

    if parts:
        _log.debug("dropping dangling continuation starting on line %d", start)


def logical_lines(file: Source, encoding: str = "utf-8") -> Iterator[tuple[int, str]]:
    """Split a stream into logical lines.

    This is shorthand for `join_lines(raw_lines(file, encoding))`.
    """

    return join_lines(raw_lines(file, encoding))
