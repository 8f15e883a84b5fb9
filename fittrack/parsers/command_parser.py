"""
Command parsing and dispatch.

Turns a raw input line into a ready-to-execute command:
- Command line: "<word> <args>"
- Profile:      "h/<HEIGHT> w/<WEIGHT> g/<GENDER> l/<CAL_LIMIT>"
- Meal/workout: "<NAME> c/<CALORIES> [d/<YYYY-MM-DD>]"
- Index, date and keyword arguments for delete/calories/find commands

Sub-parsers raise ParseException subclasses; parse_command() catches them
and returns an InvalidCommand instead, so it never raises.
"""
import logging
import math
import re
from types import MappingProxyType
from typing import Optional, Type

from fittrack.commands import Command, CommandRegistry, InvalidCommand, get_registry
from fittrack.exceptions import (
    ParseException,
    PatternMatchFailException,
    NumberFormatException,
    NegativeNumberException,
    WrongGenderException,
    IndexOutOfBoundsException,
)
from fittrack.models import (
    Calories,
    Date,
    Entry,
    Gender,
    Height,
    Meal,
    UserProfile,
    Weight,
    Workout,
)

logger = logging.getLogger(__name__)


# Regex patterns
COMMAND_RE = re.compile(r"(?P<word>\S+)(?P<args>.*)", re.DOTALL)

PROFILE_RE = re.compile(
    r"h/(?P<height>\S+)\s+w/(?P<weight>\S+)\s+g/(?P<gender>\S+)\s+l/(?P<cal_limit>\S+)"
)

# Name is greedy, so it runs up to the last " c/" marker
ENTRY_RE = re.compile(
    r"(?P<name>.+)\s+c/(?P<calories>\S+)(?:\s+d/(?P<date>\S+))?"
)

VALID_GENDERS = ("M", "F")

# Plain decimal numbers only: no underscores, no nan/inf words
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_number(token: str) -> float:
    """
    Parse a numeric token as a finite float.

    Args:
        token: Text like "72.5" or "1e3"

    Returns:
        Parsed value

    Raises:
        NumberFormatException: If token is not a finite number
    """
    if not NUMBER_RE.fullmatch(token):
        raise NumberFormatException(f"'{token}' is not a valid number.")
    value = float(token)
    if not math.isfinite(value):
        raise NumberFormatException(f"'{token}' is not a valid number.")
    return value


class CommandParser:
    """
    Dispatcher from input lines to commands, plus argument sub-parsers.

    The word-to-class mapping is frozen at construction; each call to
    parse_command() builds a fresh command instance.
    """

    def __init__(self, registry: Optional[CommandRegistry] = None):
        """
        Initialize parser.

        Args:
            registry: Command registry (defaults to the global one)
        """
        registry = registry or get_registry()
        self._commands = MappingProxyType(registry.as_dict())

    @property
    def command_words(self) -> tuple:
        """Registered command words in registration order."""
        return tuple(self._commands)

    def get_command_class(self, word: str) -> Optional[Type[Command]]:
        """Command class registered for a word, or None."""
        return self._commands.get(word)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def parse_command(self, command_line: str) -> Command:
        """
        Parse a raw input line into a command.

        Args:
            command_line: Line as typed by the user

        Returns:
            Armed command, or InvalidCommand if the line is empty, the
            word is unknown or the arguments fail to parse
        """
        match = COMMAND_RE.fullmatch(command_line.strip())
        if not match:
            return self.get_invalid_command(command_line)

        word = match.group("word").strip()
        args = match.group("args").strip()

        command = self.get_blank_command(word, command_line)
        if isinstance(command, InvalidCommand):
            return self.get_invalid_command(command_line)

        try:
            command.set_arguments(args, self)
        except ParseException as e:
            logger.debug("Failed to parse %r: %s", command_line, e)
            return self.get_invalid_command(command_line, e)

        return command

    def get_blank_command(self, word: str, command_line: str) -> Command:
        """
        Create a command with no arguments set.

        Args:
            word: Command word (case-sensitive)
            command_line: Raw line, kept on the command

        Returns:
            New command instance, or a bare InvalidCommand for unknown words
        """
        command_class = self._commands.get(word)
        if command_class is None:
            return InvalidCommand(command_line)
        return command_class(command_line)

    def get_invalid_command(self, command_line: str,
                            error: Optional[ParseException] = None) -> InvalidCommand:
        """
        Build the placeholder for a line that could not be used.

        Args:
            command_line: Raw line
            error: Cause of the failure, if known

        Returns:
            InvalidCommand ready to execute
        """
        invalid = InvalidCommand(command_line, error)
        invalid.set_arguments(command_line, self)
        return invalid

    def get_invalid_command_result(self, command_line: str, error: ParseException):
        """Execute the invalid-command placeholder for a failure found at execution time."""
        return self.get_invalid_command(command_line, error).execute()

    @staticmethod
    def get_first_word(text: str) -> str:
        """First whitespace-delimited token, or "" for blank text."""
        parts = text.split()
        return parts[0] if parts else ""

    # ------------------------------------------------------------------
    # Argument sub-parsers
    # ------------------------------------------------------------------

    def parse_profile(self, profile: str) -> UserProfile:
        """
        Parse "h/<HEIGHT> w/<WEIGHT> g/<GENDER> l/<CAL_LIMIT>".

        Numbers are checked before signs, and signs before gender, so the
        reported error is always the first one in that order. Only the
        first letter of the gender token is checked.

        Args:
            profile: Argument string

        Returns:
            New UserProfile

        Raises:
            PatternMatchFailException: Shape mismatch
            NumberFormatException: Height, weight or limit not numeric
            NegativeNumberException: Height, weight or limit below zero
            WrongGenderException: Gender not starting with M or F
        """
        match = PROFILE_RE.fullmatch(profile)
        if not match:
            raise PatternMatchFailException(
                "Profile must look like: h/<HEIGHT> w/<WEIGHT> g/<GENDER> l/<CALORIE_LIMIT>"
            )

        height = parse_number(match.group("height"))
        weight = parse_number(match.group("weight"))
        cal_limit = parse_number(match.group("cal_limit"))

        if height < 0 or weight < 0 or cal_limit < 0:
            raise NegativeNumberException(
                "Height, weight and calorie limit cannot be negative."
            )

        gender = match.group("gender")[0]
        if gender not in VALID_GENDERS:
            raise WrongGenderException()

        return UserProfile(Height(height), Weight(weight), Calories(cal_limit), Gender(gender))

    def parse_meal(self, meal: str) -> Meal:
        """
        Parse "<NAME> c/<CALORIES> [d/<DATE>]" into a Meal.

        Raises:
            PatternMatchFailException: Shape mismatch or bad date
            NumberFormatException: Calories not numeric
            NegativeNumberException: Calories below zero
        """
        return self._parse_entry(meal, Meal)

    def parse_workout(self, workout: str) -> Workout:
        """
        Parse "<NAME> c/<CALORIES> [d/<DATE>]" into a Workout.

        Raises:
            PatternMatchFailException: Shape mismatch or bad date
            NumberFormatException: Calories not numeric
            NegativeNumberException: Calories below zero
        """
        return self._parse_entry(workout, Workout)

    def _parse_entry(self, text: str, entry_class: Type[Entry]) -> Entry:
        match = ENTRY_RE.fullmatch(text)
        if not match:
            raise PatternMatchFailException(
                "Entry must look like: <NAME> c/<CALORIES> [d/<YYYY-MM-DD>]"
            )

        name = match.group("name").strip()
        if not name:
            raise PatternMatchFailException("Entry name cannot be empty.")
        calories = parse_number(match.group("calories"))
        if calories < 0:
            raise NegativeNumberException("Calories cannot be negative.")

        date_text = match.group("date")
        date = Date.today() if date_text is None else self.parse_date(date_text)

        return entry_class(name, Calories(calories), date)

    def parse_index(self, args: str) -> int:
        """
        Parse a 1-based list index.

        Only the lower bound is checked here; the list being indexed
        checks the upper bound when the command runs.

        Raises:
            PatternMatchFailException: Empty input
            NumberFormatException: Not an integer
            IndexOutOfBoundsException: Zero or negative
        """
        index = args.strip()
        if not index:
            raise PatternMatchFailException("Please provide an index.")
        if not INTEGER_RE.fullmatch(index):
            raise NumberFormatException("Index must be an integer.")
        idx = int(index)
        if idx <= 0:
            raise IndexOutOfBoundsException.index_invalid()
        return idx

    def parse_date(self, args: str) -> Date:
        """
        Parse a YYYY-MM-DD date.

        Raises:
            PatternMatchFailException: Not a valid date
        """
        text = args.strip()
        try:
            return Date.parse(text)
        except ValueError:
            raise PatternMatchFailException(
                f"'{text}' is not a valid date. Use YYYY-MM-DD."
            ) from None

    def parse_keyword(self, args: str) -> str:
        """
        Parse a search keyword.

        Raises:
            PatternMatchFailException: Empty input
        """
        keyword = args.strip()
        if not keyword:
            raise PatternMatchFailException("Please provide a keyword to search for.")
        return keyword
