"""
Recoverable parse failures raised while reading commands.

None of these is fatal: the dispatcher turns them into an invalid command
whose result explains what went wrong.
"""
from typing import Optional


class ParseException(Exception):
    """
    Base class for all parse failures.

    Attributes:
        message: Human-readable explanation shown to the user
    """

    default_message = "Failed to parse the command."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class PatternMatchFailException(ParseException):
    """Input does not have the expected shape."""

    default_message = "Arguments do not match the expected format."


class NumberFormatException(ParseException):
    """A numeric token could not be parsed."""

    default_message = "Expected a number."


class NegativeNumberException(ParseException):
    """A numeric field is below zero where that is not allowed."""

    default_message = "Numbers cannot be negative."


class WrongGenderException(ParseException):
    """Gender is neither M nor F."""

    default_message = "Gender must be M or F."


class IndexOutOfBoundsException(ParseException):
    """An index is zero, negative, or past the end of a list."""

    default_message = "Index is invalid."

    @classmethod
    def index_invalid(cls) -> 'IndexOutOfBoundsException':
        """Index below 1."""
        return cls("Index must be a positive integer.")

    @classmethod
    def index_out_of_range(cls, size: int) -> 'IndexOutOfBoundsException':
        """Index past the end of a list of the given size."""
        if size == 0:
            return cls("Index is out of range: the list is empty.")
        return cls(f"Index is out of range: choose between 1 and {size}.")
