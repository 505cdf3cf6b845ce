"""Executable lookup on the search path."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from minsh.host import Host

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def split_search_path(value: str | None) -> tuple[Path, ...]:
    """Split a ``PATH``-style value into directories, keeping their order."""
    if not value:
        return ()
    return tuple(Path(entry) for entry in value.split(os.pathsep))


def is_executable_file(mode: int) -> bool:
    return stat.S_ISREG(mode) and bool(mode & EXECUTABLE_BITS)


def find_executable(name: str, search_path: Iterable[Path], *, host: Host) -> Path | None:
    """Return the first ``directory/name`` that is a regular executable file.

    Directories are scanned in order and the first match wins.
    """
    for directory in search_path:
        candidate = directory / name
        try:
            mode = host.stat(candidate).st_mode
        except OSError:
            continue
        if is_executable_file(mode):
            logger.debug("resolved {} to {}", name, candidate)
            return candidate
    logger.debug("{} not found on search path", name)
    return None
