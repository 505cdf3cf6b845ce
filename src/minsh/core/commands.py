"""Command line parsing into the closed set of shell commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minsh.core.tokenizer import tokenize

BUILTIN_NAMES = frozenset({"exit", "echo", "type", "pwd", "cd"})


@dataclass(frozen=True)
class Exit:
    """Terminate the shell."""


@dataclass(frozen=True)
class Echo:
    """Print arguments separated by single spaces."""

    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class Pwd:
    """Print the current working directory."""


@dataclass(frozen=True)
class Cd:
    """Change the current working directory."""

    target: str


@dataclass(frozen=True)
class Type:
    """Describe how a name would be interpreted."""

    name: str


@dataclass(frozen=True)
class External:
    """Run a program found on the search path."""

    name: str
    args: tuple[str, ...] = ()


ParsedCommand = Union[Exit, Echo, Pwd, Cd, Type, External]


def split_command_line(line: str) -> tuple[str, str]:
    """Split ``line`` at its first whitespace character into name and remainder."""
    for index, char in enumerate(line):
        if char.isspace():
            return line[:index], line[index + 1 :]
    return line, ""


def parse_command(line: str) -> ParsedCommand:
    """Parse one input line into a command value."""
    name, rest = split_command_line(line)
    args = tuple(tokenize(rest))

    if name == "exit":
        return Exit()
    if name == "echo":
        return Echo(args)
    if name == "pwd":
        return Pwd()
    if name == "cd":
        return Cd(" ".join(args))
    if name == "type":
        return Type(" ".join(args))
    return External(name, args)
