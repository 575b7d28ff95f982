# annotator/errors.py

from typing import Optional


class AnnotatorError(Exception):
    """Base class for every error the annotator reports to the user."""


class ArgumentError(AnnotatorError):
    """Wrong number of command-line arguments."""


class FileReadError(AnnotatorError):
    """The board file could not be read."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class ParseError(AnnotatorError, ValueError):
    """
    The input is not a valid board.

    line / column are 1-based and point at the offending position
    (column is None when the whole line is at fault).
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)


class InvalidCharacter(ParseError):
    def __init__(self, char: str, line: Optional[int] = None, column: Optional[int] = None):
        self.char = char
        super().__init__(f"invalid character {char!r}", line, column)


class InvalidShape(ParseError):
    def __init__(self, expected: int, actual: int, line: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} cells in row but found {actual}", line)
