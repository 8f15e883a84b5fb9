"""
Shared behaviour for meal and workout commands.

Concrete commands set `kind` ("meal" or "workout") and implement
entries() to pick the list they work on.
"""
from abc import abstractmethod
from typing import Optional

from .base import Command, CommandResult, SessionState
from fittrack.data import EntryList
from fittrack.models import Date, Entry


class EntryCommand(Command):
    """Command that reads or changes one of the session's entry lists."""

    kind: str = ""

    @abstractmethod
    def entries(self, session: SessionState) -> EntryList:
        """List this command works on."""


class AddEntryCommand(EntryCommand):
    """Append a parsed entry."""

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.entry: Optional[Entry] = None

    def execute(self, session: SessionState) -> CommandResult:
        entries = self.entries(session)
        entries.add(self.entry)
        return CommandResult(
            f"I've added the following {self.kind}:\n  {self.entry}\n"
            f"You now have {len(entries)} {self.kind}(s)."
        )


class DeleteEntryCommand(EntryCommand):
    """Remove an entry by 1-based index."""

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.index: int = 0

    def set_arguments(self, args, parser) -> None:
        self.index = parser.parse_index(args)

    def execute(self, session: SessionState) -> CommandResult:
        # Raises IndexOutOfBoundsException past the end of the list
        removed = self.entries(session).delete(self.index)
        return CommandResult(f"I've deleted the following {self.kind}:\n  {removed}")


class ViewEntryCommand(EntryCommand):
    """List all entries with their indices."""

    def execute(self, session: SessionState) -> CommandResult:
        entries = self.entries(session)
        if not entries:
            return CommandResult(f"You have not logged any {self.kind}s yet.")
        lines = [f"These are your {self.kind}s:"]
        lines.extend(f"{i}. {entry}" for i, entry in enumerate(entries, 1))
        return CommandResult("\n".join(lines))


class FindEntryCommand(EntryCommand):
    """Case-insensitive keyword search over entry names."""

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.keyword: str = ""

    def set_arguments(self, args, parser) -> None:
        self.keyword = parser.parse_keyword(args)

    def execute(self, session: SessionState) -> CommandResult:
        matches = self.entries(session).find(self.keyword)
        if not matches:
            return CommandResult(f"No {self.kind}s match '{self.keyword}'.")
        lines = [f"These {self.kind}s match '{self.keyword}':"]
        lines.extend(f"{i}. {entry}" for i, entry in matches)
        return CommandResult("\n".join(lines))


class TotalCaloriesCommand(EntryCommand):
    """Sum calories over the list, optionally for one date."""

    # "consumed" or "burnt"
    verb: str = ""

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.date: Optional[Date] = None

    def set_arguments(self, args, parser) -> None:
        if args:
            self.date = parser.parse_date(args)

    def execute(self, session: SessionState) -> CommandResult:
        total = self.entries(session).total_calories(self.date)
        if self.date is None:
            return CommandResult(f"Total calories {self.verb}: {total}")
        return CommandResult(f"Total calories {self.verb} on {self.date}: {total}")
