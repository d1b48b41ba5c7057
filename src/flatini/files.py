"""Loading and saving entries from paths on disk."""

import logging
import pathlib
from collections.abc import Iterable

import chardet

from .entry import Entry
from .errors import EncodingError
from .reader import load
from .writer import dump

_log = logging.getLogger(__name__)


def detect_encoding(file: Iterable[bytes]) -> str | None:
    """Determine the encoding of a binary file.

    Args:
        file: The file to detect the encoding of.

    Returns:
        The encoding if detected successfully, otherwise None.
        An empty file is taken to be UTF-8.
    """

    detector = chardet.UniversalDetector()
    empty = True

    for line in file:
        empty = False
        detector.feed(line)

        if detector.done:
            break

    result = detector.close()

    if empty:
        # Nothing to detect, and nothing to decode either.
        return "utf-8"

    if encoding := result["encoding"]:
        encoding = encoding.lower()

        if encoding == "ascii":
            # ASCII is a subset of UTF-8, and UTF-8 won't choke on a stray non-ASCII byte
            # past the part of the file the detector looked at.
            encoding = "utf-8"

        return encoding

    return None


def load_path(path: str | pathlib.Path, encoding: str | None = None) -> list[Entry]:
    """Parse a file on disk into a list of entries.

    Args:
        path: The path to the file.
        encoding: The file encoding. If None, encoding detection is attempted.

    Returns:
        The entries in document order.

    Raises:
        EncodingError: The encoding could not be detected.
        MalformedLineError: A line is not a comment, section or entry.
    """

    if isinstance(path, str):
        path = pathlib.Path(path)

    if encoding is None:
        encoding = detect_path_encoding(path)

    with path.open("rb") as f:
        return load(f, encoding=encoding)


def detect_path_encoding(path: str | pathlib.Path) -> str:
    """Determine the encoding of a file on disk.

    Args:
        path: The path to the file.

    Returns:
        The encoding.

    Raises:
        EncodingError: The encoding could not be detected.
    """

    with open(path, "rb") as f:
        encoding = detect_encoding(f)

    if encoding is None:
        raise EncodingError(f"failed to detect encoding for {path}")

    _log.debug("detected encoding %s for %s", encoding, path)

    return encoding


def save_path(
    entries: Iterable[Entry], path: str | pathlib.Path, encoding: str = "utf-8"
):
    """Serialize entries to a file on disk, overwriting it.

    Args:
        entries: The entries to serialize, in order.
        path: The path to the file.
        encoding: The file encoding. Defaults to UTF-8.

    Raises:
        OSError: Writing to the file failed.
    """

    if isinstance(path, str):
        path = pathlib.Path(path)

    with path.open("wb") as f:
        dump(entries, f, encoding=encoding)

