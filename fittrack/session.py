"""
One tracking session: parse a line, execute it, return the result.
"""
import logging
from typing import Optional

from fittrack.commands import CommandResult, SessionState
from fittrack.exceptions import ParseException
from fittrack.parsers import CommandParser

logger = logging.getLogger(__name__)


class FitTrackSession:
    """
    Owns the session state and runs commands against it one at a time.

    Attributes:
        state: Profile, meals and workouts of this session
        parser: Dispatcher used for every line
        exit_requested: Set once an exit command has run
    """

    def __init__(self, state: Optional[SessionState] = None,
                 parser: Optional[CommandParser] = None):
        self.state = state or SessionState()
        self.parser = parser or CommandParser()
        self.exit_requested = False

    def run_command(self, command_line: str) -> CommandResult:
        """
        Parse and execute one input line.

        Parse errors found while executing (an index past the end of a
        list) are reported the same way as those found while parsing.

        Args:
            command_line: Line as typed by the user

        Returns:
            Result message of the command
        """
        command = self.parser.parse_command(command_line)
        try:
            result = command.execute(self.state)
        except ParseException as e:
            logger.debug("Execution of %r failed: %s", command_line, e)
            return self.parser.get_invalid_command_result(command_line, e)

        logger.debug("Executed %s", command.name)
        if command.is_exit:
            self.exit_requested = True
        return result
