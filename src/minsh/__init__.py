"""minsh - a small interactive command interpreter."""

from .core import parse_command, tokenize
from .shell import Shell

__version__ = "0.1.0"

__all__ = ["Shell", "parse_command", "tokenize"]
