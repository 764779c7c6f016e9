"""Incremental-search command picker shown when no arguments are given."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence

from .console import Console

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - platforms without termios
    termios = None
    tty = None

COMMANDS: tuple[str, ...] = (
    "add <file>",
    "branch current",
    "branch checkout",
    "branch checkout-remote",
    "branch delete",
    "branch delete-merged",
    "push current",
    "push force",
    "pull current",
    "pull rebase",
    "log simple",
    "log graph",
    "commit allow-empty",
    "commit tmp",
    "fetch --prune",
    "clean files",
    "clean dirs",
    "reset clean",
    "commit-push",
    "clean interactive",
    "stash trash",
    "rebase interactive",
    "remote list",
    "remote add <name> <url>",
    "remote remove <name>",
    "remote set-url <name> <url>",
    "add-commit-push",
    "pull-rebase-push",
    "stash-pull-pop",
    "reset-clean",
)

_ENTER = 13
_CTRL_P = 16
_CTRL_N = 14
_BACKSPACES = (127, 8)

_CLEAR_SCREEN = "\033[H\033[2J\033[H"
_HEADER = (
    "Select a command (incremental search: type to filter, ctrl+n: down, "
    "ctrl+p: up, Enter: execute, Ctrl+C: quit)\n"
)

_PLACEHOLDER = re.compile(r"<([^<>]*)>")


def extract_placeholders(template: str) -> list[str]:
    """Return the names written as ``<name>`` in ``template``, in order."""
    return _PLACEHOLDER.findall(template)


def fill_placeholders(template: str, values: Mapping[str, str]) -> str:
    """Replace every ``<name>`` in ``template`` with ``values[name]``."""
    result = template
    for name, value in values.items():
        result = result.replace(f"<{name}>", value)
    return result


class CommandPicker:
    """State of the incremental search: query text and highlighted entry."""

    def __init__(self, commands: Sequence[str] | None = None):
        self.commands = list(commands if commands is not None else COMMANDS)
        self.query = ""
        self.selected = 0
        self.choice: str | None = None
        self.finished = False

    def filtered(self) -> list[str]:
        """Commands containing the current query."""
        return [command for command in self.commands if self.query in command]

    def _clamp(self, matches: Sequence[str]) -> None:
        if self.query:
            if self.selected >= len(matches):
                self.selected = len(matches) - 1
            if self.selected < 0:
                self.selected = 0

    def feed(self, byte: int) -> bool:
        """Handle one input byte; return True once a choice has been made or abandoned."""
        if self.finished:
            return True
        matches = self.filtered()
        self._clamp(matches)
        if byte == _ENTER:
            self.choice = matches[self.selected] if matches else None
            self.finished = True
        elif byte == _CTRL_P:
            if self.selected > 0:
                self.selected -= 1
        elif byte == _CTRL_N:
            if self.selected < len(matches) - 1:
                self.selected += 1
        elif byte in _BACKSPACES:
            self.query = self.query[:-1]
        elif 32 <= byte <= 126:
            self.query += chr(byte)
        return self.finished

    def render(self) -> str:
        """The full screen for the current state."""
        parts = [_CLEAR_SCREEN, _HEADER, f"\rSearch: {self.query}\n\n"]
        matches = self.filtered()
        if not self.query:
            parts.append("(Type to filter commands...)\n")
        else:
            if not matches:
                parts.append("  (No matching command)\n")
            self._clamp(matches)
            for index, command in enumerate(matches):
                marker = ">" if index == self.selected else " "
                parts.append(f"\r{marker} {command}\n")
        parts.append("\n\r")
        return "".join(parts)


def _raw_mode_errors() -> tuple[type[BaseException], ...]:
    errors: tuple[type[BaseException], ...] = (OSError, ValueError, AttributeError)
    if termios is not None:
        errors += (termios.error,)
    return errors


def _pick(console: Console, fd: int) -> str | None:
    picker = CommandPicker()
    while True:
        console.write(picker.render())
        try:
            data = os.read(fd, 1)
        except KeyboardInterrupt:
            return None
        if not data:
            return None
        if picker.feed(data[0]):
            break
    if picker.choice is not None:
        console.write(f"\nExecute: {picker.choice}\n")
    return picker.choice


def interactive_ui(console: Console | None = None) -> list[str] | None:
    """Let the user pick a command; return its argument vector or None."""
    console = console if console is not None else Console()
    try:
        if termios is None or tty is None:
            raise OSError("terminal control is not available")
        fd = console.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    except _raw_mode_errors() as exc:
        console.writeline(f"Failed to set terminal to raw mode: {exc}")
        return None
    try:
        template = _pick(console, fd)
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except termios.error as exc:
            console.writeline(f"failed to restore terminal state: {exc}")
    if template is None:
        return None
    values: dict[str, str] = {}
    for name in extract_placeholders(template):
        console.write("\n\r")
        values[name] = console.prompt(f"Enter value for {name}: ")
    return ["ggc", *fill_placeholders(template, values).split()]