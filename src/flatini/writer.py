import io
import logging
from collections.abc import Callable, Iterable
from typing import IO

from .entry import Entry

_log = logging.getLogger(__name__)

Emit = Callable[[Entry], None]


def escape(text: str) -> str:
    """Escape newlines as line continuations, so they survive a round trip."""

    return text.replace("\n", "\\\n")


class _Sink:
    # Remembers the first write error and drops all writes after it,
    # so a failing stream doesn't get a mess of partial writes.

    def __init__(self, file: IO[str] | IO[bytes], encoding: str):
        self.file = file
        self.binary = isinstance(file, (io.RawIOBase, io.BufferedIOBase))
        self.encoding = encoding
        self.error: OSError | ValueError | None = None

    def write(self, text: str):
        if self.error is not None:
            return

        try:
            # Encoding fails before anything reaches the stream.
            data = text.encode(self.encoding) if self.binary else text
            self.file.write(data)
        except (OSError, ValueError) as e:
            # ValueError covers closed streams and UnicodeEncodeError.
            _log.debug("write failed, suppressing further writes: %s", e)
            self.error = e


def write(
    file: IO[str] | IO[bytes], produce: Callable[[Emit], None], encoding: str = "utf-8"
):
    """Serialize entries to a stream.

    `produce` is called once with an `emit` function, which it should call for each entry to write.
    Consecutive entries in the same section are grouped under a single section header.

    If writing to the stream fails, the remaining writes are skipped
    and the first error is raised once `produce` returns.

    Args:
        file: A text or binary stream.
        produce: Called with the `emit` function.
        encoding: How to encode text for binary streams. Defaults to UTF-8.

    Raises:
        OSError: Writing to the stream failed.
        ValueError: The stream is closed, or the text could not be encoded.
    """

    sink = _Sink(file, encoding)
    section = ""
    wrote = False

    def emit(entry: Entry):
        nonlocal section, wrote

        # One write per entry, so a failure never leaves half a line behind.
        parts = []

        if entry.section != section:
            if wrote:
                parts.append("\n")

            parts.append(f"[{escape(entry.section)}]\n")
            section = entry.section

        if entry.key:
            parts.append(f"{escape(entry.key)} ")

        parts.append("=")

        if entry.value:
            parts.append(f" {escape(entry.value)}")

        parts.append("\n")
        sink.write("".join(parts))

        wrote = True

    produce(emit)

    if sink.error is not None:
        raise sink.error


def dump(entries: Iterable[Entry], file: IO[str] | IO[bytes], encoding: str = "utf-8"):
    """Serialize entries to a stream.

    Args:
        entries: The entries to serialize, in order.
        file: See write().
        encoding: See write().

    Raises:
        See write().
    """

    def produce(emit: Emit):
        for entry in entries:
            emit(entry)

    write(file, produce, encoding=encoding)


def dumps(entries: Iterable[Entry]) -> str:
    """Serialize entries to a string.

    Args:
        entries: The entries to serialize, in order.

    Returns:
        The entries as a string.
    """

    with io.StringIO(newline="\n") as buf:
        dump(entries, buf)
        return buf.getvalue()
