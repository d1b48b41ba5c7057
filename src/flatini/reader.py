import dataclasses
import io
import logging
from collections.abc import Callable

from .entry import Entry
from .errors import MalformedLineError
from .lines import Source, logical_lines

_log = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Comment:
    """A comment line, i.e. # text."""

    text: str


@dataclasses.dataclass(slots=True)
class Section:
    """A section header, i.e. [name]."""

    name: str


@dataclasses.dataclass(slots=True)
class Property:
    """A property, i.e. key = value."""

    key: str
    value: str


Line = Comment | Section | Property


def parse(line: str) -> Line | None:
    """Classify a logical line.

    The checks are done on the untrimmed line, in order:
    a leading '#' is a comment, a leading '[' and trailing ']' is a section,
    and anything containing '=' is a property split on the first '='.
    The section name is not validated, so `[a=b]` is the section `a=b`.

    Args:
        line: The logical line to parse.

    Returns:
        A comment, section, property, or None if the line failed to parse.
    """

    if line.startswith("#"):
        return Comment(line[1:])

    if line.startswith("[") and line.endswith("]"):
        return Section(line[1:-1])

    key, sep, value = line.partition("=")
    if sep:
        return Property(key=key.strip(), value=value.strip())

    return None


def read(file: Source, consume: Callable[[Entry], None], encoding: str = "utf-8"):
    """Parse a stream, passing each entry to a callback as soon as it is parsed.

    Parsing stops at the first exception raised by `consume`, which is propagated as is.
    Entries already passed to `consume` are not taken back.

    Args:
        file: A binary stream, a text stream or any iterable of lines.
            Binary streams are not closed.
        consume: Called once for each entry, in document order.
        encoding: How to decode binary streams. Defaults to UTF-8.

    Raises:
        MalformedLineError: A line is not a comment, section or entry.
    """

    section = ""
    count = 0

    for line_number, line in logical_lines(file, encoding):
        match parse(line):
            case Comment():
                continue

            case Section(name):
                _log.debug("line %d: entering section %r", line_number, name)
                section = name

            case Property(key, value):
                consume(Entry(section, key, value))
                count += 1

            case None:
                raise MalformedLineError(line=line, line_number=line_number)

    _log.debug("read %d entries", count)


def load(file: Source, encoding: str = "utf-8") -> list[Entry]:
    """Parse a stream into a list of entries.

    Args:
        file: See read().
        encoding: See read().

    Returns:
        The entries in document order.

    Raises:
        See read().
    """

    entries: list[Entry] = []
    read(file, entries.append, encoding=encoding)

    return entries


def loads(text: str) -> list[Entry]:
    """Parse a text into a list of entries.

    Args:
        text: The text to parse.

    Returns:
        See load().

    Raises:
        See read().
    """

    # Don't translate newlines, so a lone '\r' stays part of its line.
    with io.StringIO(text, newline="\n") as buf:
        return load(buf)
