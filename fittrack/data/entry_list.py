"""
In-memory lists of logged meals and workouts.

Entries keep insertion order and are addressed by 1-based index,
matching what the user sees in viewmeal/viewworkout.
"""
import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from fittrack.exceptions import IndexOutOfBoundsException
from fittrack.models import Calories, Date, Entry, Meal, Workout

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entry)


class EntryList(Generic[E]):
    """
    Ordered collection of entries with index-based removal and search.
    """

    def __init__(self, entries: Optional[List[E]] = None):
        """
        Initialize list.

        Args:
            entries: Initial entries (copied)
        """
        self._entries: List[E] = list(entries or [])

    def add(self, entry: E) -> None:
        """Append an entry."""
        self._entries.append(entry)
        logger.debug("Added %s (%d total)", entry, len(self._entries))

    def delete(self, index: int) -> E:
        """
        Remove entry by 1-based index.

        Args:
            index: Position as shown to the user

        Returns:
            The removed entry

        Raises:
            IndexOutOfBoundsException: If index is outside 1..len
        """
        self._check_index(index)
        removed = self._entries.pop(index - 1)
        logger.debug("Deleted %s at index %d", removed, index)
        return removed

    def find(self, keyword: str) -> List[Tuple[int, E]]:
        """
        Search names for a keyword (case-insensitive substring).

        Args:
            keyword: Text to look for

        Returns:
            List of (1-based index, entry) for every match
        """
        return [(i, e) for i, e in enumerate(self._entries, 1) if e.matches(keyword)]

    def on_date(self, date: Date) -> List[E]:
        """Entries logged on a given date."""
        return [e for e in self._entries if e.date == date]

    def total_calories(self, date: Optional[Date] = None) -> Calories:
        """
        Sum calories over all entries, or only those on a date.

        Args:
            date: Optional day to restrict the sum to

        Returns:
            Total calories
        """
        entries = self._entries if date is None else self.on_date(date)
        total = Calories(0)
        for entry in entries:
            total = total + entry.calories
        return total

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= len(self._entries):
            raise IndexOutOfBoundsException.index_out_of_range(len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class MealList(EntryList[Meal]):
    """Logged meals."""


class WorkoutList(EntryList[Workout]):
    """Logged workouts."""
