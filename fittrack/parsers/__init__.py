"""
Parsing utilities for command lines and their arguments.
"""
from .command_parser import (
    CommandParser,
    parse_number,
)

__all__ = [
    'CommandParser',
    'parse_number',
]
