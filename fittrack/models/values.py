"""
Value types for profile measurements, calories, gender and dates.

Each type validates on construction and knows how to format itself.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime

from config import DATE_FORMAT


ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _check_non_negative(kind: str, value: float) -> float:
    """Coerce to float and reject negative values."""
    value = float(value)
    if value < 0:
        raise ValueError(f"{kind} cannot be negative: {value:g}")
    return value


def _format_number(value: float) -> str:
    """Format without trailing zeros or scientific notation for normal sizes."""
    return f"{value:.10g}"


@dataclass(frozen=True)
class Height:
    """
    Height in centimetres.

    Example:
        >>> str(Height(180))
        '180cm'
    """
    value: float

    def __post_init__(self):
        """Validate height is non-negative."""
        object.__setattr__(self, "value", _check_non_negative("Height", self.value))

    @property
    def metres(self) -> float:
        """Height converted to metres."""
        return self.value / 100

    def __str__(self) -> str:
        return f"{_format_number(self.value)}cm"


@dataclass(frozen=True)
class Weight:
    """
    Weight in kilograms.

    Example:
        >>> str(Weight(72.5))
        '72.5kg'
    """
    value: float

    def __post_init__(self):
        """Validate weight is non-negative."""
        object.__setattr__(self, "value", _check_non_negative("Weight", self.value))

    def __str__(self) -> str:
        return f"{_format_number(self.value)}kg"


@dataclass(frozen=True)
class Calories:
    """
    Energy amount in kcal, used for meals, workouts and the daily limit.

    Example:
        >>> str(Calories(500))
        '500kcal'
    """
    value: float

    def __post_init__(self):
        """Validate calories are non-negative."""
        object.__setattr__(self, "value", _check_non_negative("Calories", self.value))

    def __add__(self, other: 'Calories') -> 'Calories':
        if not isinstance(other, Calories):
            return NotImplemented
        return Calories(self.value + other.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}kcal"


@dataclass(frozen=True)
class Gender:
    """
    Gender of the user, stored as 'M' or 'F'.

    Example:
        >>> str(Gender("F"))
        'Female'
    """
    value: str

    NAMES = {"M": "Male", "F": "Female"}

    def __post_init__(self):
        """Validate gender letter."""
        if self.value not in self.NAMES:
            raise ValueError(f"Gender must be 'M' or 'F', got: {self.value!r}")

    def __str__(self) -> str:
        return self.NAMES[self.value]


@dataclass(frozen=True, order=True)
class Date:
    """
    Calendar date of a logged meal or workout.

    Example:
        >>> str(Date.parse("2024-01-01"))
        '2024-01-01'
    """
    value: date

    @classmethod
    def today(cls) -> 'Date':
        """Date for the current day."""
        return cls(date.today())

    @classmethod
    def parse(cls, text: str) -> 'Date':
        """
        Parse a YYYY-MM-DD string.

        Args:
            text: Date string

        Returns:
            Date instance

        Raises:
            ValueError: If text is not a valid YYYY-MM-DD date
        """
        if not ISO_DATE_RE.match(text):
            raise ValueError(f"Invalid date format: {text!r} (expected YYYY-MM-DD)")
        return cls(datetime.strptime(text, DATE_FORMAT).date())

    def __str__(self) -> str:
        return self.value.strftime(DATE_FORMAT)
