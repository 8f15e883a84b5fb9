"""
Basic commands: help, exit, and the invalid-command placeholder.
"""
from typing import Optional, Tuple, Type

from .base import Command, CommandResult, SessionState, register_command
from fittrack.exceptions import ParseException


@register_command
class HelpCommand(Command):
    """Show help information."""

    name = "help"
    help_text = "lists all commands, or explains one command."
    usage = "help [COMMAND]"

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.command_words: Tuple[str, ...] = ()
        self.topic: Optional[Type[Command]] = None

    def set_arguments(self, args, parser) -> None:
        """Remember the available words and the optional command to explain."""
        self.command_words = parser.command_words
        if args:
            self.topic = parser.get_command_class(parser.get_first_word(args))

    def execute(self, session: SessionState) -> CommandResult:
        """Display help for one command or list all of them."""
        if self.topic is not None:
            return CommandResult(self.topic.get_help())

        lines = ["Available commands:"]
        lines.extend(f"  {word}" for word in self.command_words)
        lines.append("Type `help <COMMAND>` to see how to use a command.")
        return CommandResult("\n".join(lines))


@register_command
class ExitCommand(Command):
    """Exit the application."""

    name = "exit"
    help_text = "exits the program."
    usage = "exit"
    is_exit = True

    def execute(self, session: SessionState) -> CommandResult:
        return CommandResult("Bye. Hope to see you again soon!")


class InvalidCommand(Command):
    """
    Placeholder for a line that could not be turned into a command.

    Never registered. Executing it only builds an error message, so it is
    always safe to run.
    """

    name = "invalid"

    def __init__(self, command_line: str = "", error: Optional[ParseException] = None):
        super().__init__(command_line)
        self.error = error
        self.intended_help: Optional[str] = None

    def set_arguments(self, args, parser) -> None:
        """Look up the help of the command the user was trying to run."""
        command_class = parser.get_command_class(parser.get_first_word(args))
        if command_class is not None:
            self.intended_help = command_class.get_help()

    def execute(self, session: Optional[SessionState] = None) -> CommandResult:
        """Explain why the line was rejected."""
        lines = [f"Invalid command: '{self.command_line.strip()}'"]
        if self.error is not None:
            lines.append(self.error.message)
        if self.intended_help:
            lines.append(self.intended_help)
        else:
            lines.append("Type `help` to see available commands.")
        return CommandResult("\n".join(lines))
