"""
Command classes for the fitness tracker REPL.
"""
from .base import (
    Command,
    CommandResult,
    CommandRegistry,
    SessionState,
    register_command,
    get_registry,
)
from .basic_commands import InvalidCommand

# Import all command modules to trigger registration (order is the help order)
from . import basic_commands
from . import profile_commands
from . import meal_commands
from . import workout_commands

__all__ = [
    'Command',
    'CommandResult',
    'CommandRegistry',
    'SessionState',
    'InvalidCommand',
    'register_command',
    'get_registry',
]
