"""Command execution against shell state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from loguru import logger

from minsh.core.commands import BUILTIN_NAMES, Cd, Echo, Exit, External, ParsedCommand, Pwd, Type
from minsh.core.resolver import find_executable, split_search_path
from minsh.errors import CommandNotFound, IoFailure, NotFound, ShellMessage
from minsh.host import Host


@dataclass(frozen=True)
class ShellState:
    """Long-lived session state; the working directory lives in the OS, not here."""

    builtins: frozenset[str]
    search_path: tuple[Path, ...]

    @classmethod
    def from_host(cls, host: Host) -> ShellState:
        """Capture the search path once, at startup."""
        return cls(builtins=BUILTIN_NAMES, search_path=split_search_path(host.getenv("PATH")))


class Dispatcher:
    """Executes parsed commands, raising ``ShellError`` on failure."""

    def __init__(self, state: ShellState, host: Host, stdout: TextIO) -> None:
        self._state = state
        self._host = host
        self._stdout = stdout

    def execute(self, command: ParsedCommand) -> None:
        logger.debug("dispatch {!r}", command)
        if isinstance(command, Exit):
            self._exit()
        elif isinstance(command, Echo):
            self._echo(command)
        elif isinstance(command, Pwd):
            self._pwd()
        elif isinstance(command, Cd):
            self._cd(command)
        elif isinstance(command, Type):
            self._type(command)
        elif isinstance(command, External):
            self._external(command)
        else:
            raise TypeError(f"unsupported command: {command!r}")

    def resolve(self, name: str) -> Path | None:
        return find_executable(name, self._state.search_path, host=self._host)

    def _exit(self) -> None:
        raise SystemExit(0)

    def _echo(self, command: Echo) -> None:
        self._println(" ".join(command.args))

    def _pwd(self) -> None:
        try:
            cwd = self._host.getcwd()
        except OSError as exc:
            raise IoFailure(exc) from exc
        self._println(cwd)

    def _type(self, command: Type) -> None:
        if command.name in self._state.builtins:
            self._println(f"{command.name} is a shell builtin")
            return
        path = self.resolve(command.name)
        if path is None:
            raise NotFound(command.name)
        self._println(f"{command.name} is {path}")

    def _cd(self, command: Cd) -> None:
        target = command.target
        if target.startswith("~"):
            home = self._host.getenv("HOME")
            if home is None:
                raise ShellMessage("cd: HOME not set")
            target = home + target[1:]
        try:
            self._host.chdir(target)
        except OSError as exc:
            logger.debug("chdir to {!r} failed: {}", target, exc)
            raise ShellMessage(f"cd: {command.target}: No such file or directory") from exc

    def _external(self, command: External) -> None:
        path = self.resolve(command.name)
        if path is None:
            raise CommandNotFound(command.name)
        try:
            output = self._host.run(path, [command.name, *command.args])
        except OSError as exc:
            raise IoFailure(exc) from exc
        self._write_bytes(output)

    def _println(self, text: str) -> None:
        self._stdout.write(text + "\n")

    def _write_bytes(self, data: bytes) -> None:
        buffer = getattr(self._stdout, "buffer", None)
        if buffer is None:
            self._stdout.write(data.decode("utf-8", errors="replace"))
            return
        self._stdout.flush()
        buffer.write(data)
        buffer.flush()
