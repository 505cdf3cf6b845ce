"""Interactive shell session."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from loguru import logger

from minsh.config import Settings
from minsh.core.commands import parse_command
from minsh.core.dispatcher import Dispatcher, ShellState
from minsh.errors import ShellError
from minsh.host import Host, OsHost


class LineSource(Protocol):
    def read_line(self, prompt: str) -> str: ...


class Shell:
    """Owns shell state and runs the read-eval-print loop."""

    def __init__(
        self,
        settings: Settings,
        reader: LineSource,
        *,
        host: Host | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._settings = settings
        self._reader = reader
        self._host = host or OsHost()
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self.state = ShellState.from_host(self._host)
        self._dispatcher = Dispatcher(self.state, self._host, self._stdout)

    def run(self) -> None:
        """Read and execute lines until end of input or ``exit``."""
        logger.debug("session started with {} search path entries", len(self.state.search_path))
        while True:
            try:
                line = self._reader.read_line(self._settings.prompt)
            except (KeyboardInterrupt, EOFError):
                self._stdout.write("\n")
                self._stdout.flush()
                break
            if not line.strip():
                continue
            self.run_line(line)

    def run_line(self, line: str) -> None:
        """Execute one line, reporting any command failure."""
        command = parse_command(line)
        try:
            self._dispatcher.execute(command)
        except ShellError as exc:
            self._report(exc)
        finally:
            self._stdout.flush()

    def _report(self, error: ShellError) -> None:
        logger.debug("command failed: {!r}", error)
        stream = self._stdout if error.user_facing else self._stderr
        stream.write(f"{error}\n")
        stream.flush()
