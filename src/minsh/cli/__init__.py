"""Command-line surface for minsh."""

from .app import app, main
from .render import LineReader

__all__ = ["LineReader", "app", "main"]
