"""Core parsing and dispatch for minsh."""

from .commands import BUILTIN_NAMES, ParsedCommand, parse_command
from .dispatcher import Dispatcher, ShellState
from .resolver import find_executable
from .tokenizer import tokenize

__all__ = [
    "BUILTIN_NAMES",
    "Dispatcher",
    "ParsedCommand",
    "ShellState",
    "find_executable",
    "parse_command",
    "tokenize",
]
