from __future__ import annotations

import io
import os
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from minsh.host import OsHost


class FakeHost(OsHost):
    """Real filesystem, scripted environment and process spawning."""

    def __init__(self, env: dict[str, str] | None = None, output: bytes = b"") -> None:
        self.env = dict(env or {})
        self.output = output
        self.calls: list[tuple[Path, list[str]]] = []

    def getenv(self, name: str) -> str | None:
        return self.env.get(name)

    def run(self, executable: Path, argv: Sequence[str]) -> bytes:
        self.calls.append((executable, list(argv)))
        return self.output


def _make_executable(directory: Path, name: str, body: str = "#!/bin/sh\nexit 0\n") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body)
    path.chmod(0o755)
    return path


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    # Restores the working directory after tests that run ``cd``.
    monkeypatch.chdir(os.getcwd())


@pytest.fixture
def make_executable() -> Callable[..., Path]:
    return _make_executable
