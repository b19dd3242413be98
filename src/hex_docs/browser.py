"""Open a local file with the platform's default document handler."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Protocol

Spawner = Callable[[list[str]], object]


def _spawn_detached(cmd: list[str]) -> subprocess.Popen:
    # Fire and forget; the browser process is never waited on.
    return subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


class Browser(Protocol):
    def open_in_browser(self, path: Path) -> None: ...


@dataclass(frozen=True)
class CommandBrowser:
    command: tuple[str, ...]
    spawn: Spawner = _spawn_detached

    def open_in_browser(self, path: Path) -> None:
        self.spawn([*self.command, str(path)])


def os_tag() -> str:
    if os.name == "nt":
        return "win32"
    if sys.platform == "darwin":
        return "darwin"
    return "unix"


_COMMANDS: dict[str, tuple[str, ...]] = {
    # `start` is a cmd.exe builtin; the empty string is the window title.
    "win32": ("cmd", "/c", "start", ""),
    "darwin": ("open",),
    "unix": ("xdg-open",),
}


def browser_for(tag: str, *, spawn: Spawner = _spawn_detached) -> CommandBrowser:
    try:
        command = _COMMANDS[tag]
    except KeyError:
        raise ValueError(f"Unsupported OS tag: {tag}") from None
    return CommandBrowser(command=command, spawn=spawn)


def default_browser() -> CommandBrowser:
    return browser_for(os_tag())
