class FlatiniError(Exception):
    """Base class for all errors raised by flatini."""


class MalformedLineError(FlatiniError, ValueError):
    """Exception raised when a line is not a comment, section or entry.

    Attributes:
        line: The logical line which failed to parse, untrimmed.
        line_number: The (1-based) number of the raw line the logical line starts on.
    """

    line: str
    line_number: int

    def __init__(self, *args, line: str = "", line_number: int = 0):
        if not args:
            args = (f"invalid line {line_number}: {line!r}",)

        super().__init__(*args)

        self.line = line
        self.line_number = line_number


class EncodingError(FlatiniError, ValueError):
    """Exception raised when the encoding of a file could not be detected."""
