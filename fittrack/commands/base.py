"""
Base command classes and registry.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Type, Optional, TYPE_CHECKING

from fittrack.data import MealList, WorkoutList
from fittrack.models import UserProfile

if TYPE_CHECKING:
    from fittrack.parsers import CommandParser


@dataclass
class SessionState:
    """
    Mutable state of one tracking session.

    Commands only touch it inside execute(); argument parsing never does.

    Attributes:
        profile: The user's profile
        meals: Logged meals in insertion order
        workouts: Logged workouts in insertion order
    """
    profile: UserProfile = field(default_factory=UserProfile)
    meals: MealList = field(default_factory=MealList)
    workouts: WorkoutList = field(default_factory=WorkoutList)


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of executing a command.

    Attributes:
        feedback: Message to show the user
    """
    feedback: str

    def __str__(self) -> str:
        return self.feedback


class Command(ABC):
    """
    Base class for all commands.

    Each command should override:
    - name: Command word that triggers it
    - help_text: Short description
    - usage: Argument format shown in help
    - set_arguments(): Argument parsing (optional, default ignores args)
    - execute(): Command logic
    """

    # Command word, matched exactly
    name: str = ""

    # Help text shown in help command
    help_text: str = ""

    # Usage line shown by `help <command>` and on invalid input
    usage: str = ""

    # Whether the session should end after this command
    is_exit: bool = False

    def __init__(self, command_line: str = ""):
        """
        Initialize a blank command.

        Args:
            command_line: Raw line the user typed
        """
        self.command_line = command_line

    def set_arguments(self, args: str, parser: 'CommandParser') -> None:
        """
        Parse and store the command's arguments.

        Args:
            args: Everything after the command word, stripped
            parser: Dispatcher whose sub-parsers can be reused

        Raises:
            ParseException: If arguments are invalid
        """

    @abstractmethod
    def execute(self, session: SessionState) -> CommandResult:
        """
        Execute the command.

        Args:
            session: Session state to read or mutate

        Returns:
            Result message
        """

    @classmethod
    def get_help(cls) -> str:
        """Description plus usage for this command."""
        lines = [f"`{cls.name}` {cls.help_text}"]
        if cls.usage:
            lines.append(f"Usage: {cls.usage}")
        return "\n".join(lines)


class CommandRegistry:
    """
    Registry for all available commands.

    Commands register themselves and can be looked up by word.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._commands: Dict[str, Type[Command]] = {}

    def register(self, command_class: Type[Command]) -> None:
        """
        Register a command class.

        Args:
            command_class: Command class to register

        Raises:
            ValueError: If the command word is empty or already taken
        """
        word = command_class.name
        if not word:
            raise ValueError(f"{command_class.__name__} has no command word")
        existing = self._commands.get(word)
        if existing is not None and existing is not command_class:
            raise ValueError(f"Command word '{word}' already registered by {existing.__name__}")
        self._commands[word] = command_class

    def get(self, word: str) -> Optional[Type[Command]]:
        """
        Get command class for a command word.

        Args:
            word: Command word (case-sensitive)

        Returns:
            Command class or None if not found
        """
        return self._commands.get(word)

    def as_dict(self) -> Dict[str, Type[Command]]:
        """Copy of the word to class mapping."""
        return dict(self._commands)


# Global registry
_registry = CommandRegistry()


def register_command(command_class: Type[Command]) -> Type[Command]:
    """
    Decorator to register a command.

    Usage:
        @register_command
        class MyCommand(Command):
            name = "mycommand"
            ...
    """
    _registry.register(command_class)
    return command_class


def get_registry() -> CommandRegistry:
    """Get the global command registry."""
    return _registry
