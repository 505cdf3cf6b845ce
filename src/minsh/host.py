"""Operating-system collaborators used by the dispatcher.

The shell reads and writes ambient process state (working directory, environment)
and spawns child processes. All of that goes through a ``Host`` so the core can be
driven by an in-memory fake in tests.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class Host(Protocol):
    """Narrow contract for process-global OS state."""

    def getcwd(self) -> str: ...

    def chdir(self, path: str) -> None: ...

    def getenv(self, name: str) -> str | None: ...

    def stat(self, path: Path) -> os.stat_result: ...

    def run(self, executable: Path, argv: Sequence[str]) -> bytes: ...


class OsHost:
    """Host backed by the real process and filesystem."""

    def getcwd(self) -> str:
        return os.getcwd()

    def chdir(self, path: str) -> None:
        os.chdir(path)

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    def stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def run(self, executable: Path, argv: Sequence[str]) -> bytes:
        """Spawn ``executable``, wait for it and return its captured stdout.

        ``argv[0]`` is the name the user typed; stdin and stderr are inherited.
        """
        # Users intentionally run arbitrary programs from the shell.
        result = subprocess.run(  # noqa: S603
            list(argv),
            executable=str(executable),
            stdout=subprocess.PIPE,
            check=False,
        )
        return result.stdout
