"""Line input for the interactive session."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory


class LineReader:
    """Reads one line per prompt.

    Terminals get a ``prompt_toolkit`` session with line editing and history;
    pipes and files are read plainly so scripted input behaves predictably.
    """

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        history_file: Path | None = None,
        interactive: bool | None = None,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        if interactive is None:
            interactive = self._stdin.isatty() and self._stdout.isatty()
        self._prompt_session: PromptSession[str] | None = None
        if interactive:
            history = FileHistory(str(history_file)) if history_file else InMemoryHistory()
            self._prompt_session = PromptSession(history=history)

    @property
    def interactive(self) -> bool:
        return self._prompt_session is not None

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line without trailing whitespace.

        Raises:
            EOFError: at end of input
        """
        if self._prompt_session is not None:
            return self._prompt_session.prompt(prompt).rstrip()

        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip()


def create_line_reader(history_file: Path | None = None) -> LineReader:
    """Create a reader bound to the process's standard streams."""
    return LineReader(history_file=history_file)
