"""
Logged meal and workout records.
"""
from dataclasses import dataclass, field

from .values import Calories, Date


@dataclass(frozen=True)
class Entry:
    """
    A named calorie amount logged on a date.

    Attributes:
        name: Entry name (non-empty)
        calories: Calories consumed or burnt
        date: Day the entry belongs to (defaults to today)
    """
    name: str
    calories: Calories
    date: Date = field(default_factory=Date.today)

    def __post_init__(self):
        """Validate name is not blank."""
        if not self.name or not self.name.strip():
            raise ValueError("Entry name cannot be empty")

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on the name."""
        return keyword.casefold() in self.name.casefold()

    def __str__(self) -> str:
        return f"{self.name} ({self.calories}, {self.date})"


@dataclass(frozen=True)
class Meal(Entry):
    """A meal; calories are consumed."""


@dataclass(frozen=True)
class Workout(Entry):
    """A workout; calories are burnt."""
