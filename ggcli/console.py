"""Terminal input/output and numbered selection menus."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

_CYAN = "\033[1;36m"
_YELLOW = "\033[1;33m"
_RED = "\033[1;31m"
_RESET = "\033[0m"

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InvalidSelection(ValueError):
    """Raised when a selection token is not a valid item number."""

    def __init__(self, token: str):
        super().__init__(f"Invalid number: {token}")
        self.token = token


class Console:
    """Line-oriented console bound to a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def writeline(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self) -> str:
        """Read one line, newline included; an empty string means end of input."""
        return self.stdin.readline()

    def prompt(self, text: str) -> str:
        """Show ``text`` and return the next input line with whitespace stripped."""
        self.write(text)
        return self.read_line().strip()


@dataclass(frozen=True)
class _Selection:
    items: list[str]
    everything: bool


def _parse_number(token: str, count: int) -> int:
    if not _NUMBER.fullmatch(token):
        raise InvalidSelection(token)
    number = int(token)
    if not 1 <= number <= count:
        raise InvalidSelection(token)
    return number


def parse_selection(text: str, items: Sequence[str]) -> list[str]:
    """Map space separated 1-based numbers in ``text`` to entries of ``items``."""
    return [items[_parse_number(token, len(items)) - 1] for token in text.split()]


def choose_one(console: Console, title: str, items: Sequence[str], prompt: str) -> int | None:
    """Show a numbered list and return the 0-based index picked.

    Returns None when the answer is empty; raises InvalidSelection otherwise
    when the answer is not a listed number.
    """
    console.writeline(title)
    for number, item in enumerate(items, start=1):
        console.writeline(f"[{number}] {item}")
    answer = console.prompt(prompt)
    if not answer:
        return None
    return _parse_number(answer, len(items)) - 1


def choose_many(console: Console, title: str, items: Sequence[str]) -> _Selection | None:
    """Ask repeatedly for a set of numbered items.

    Typing ``all`` picks everything, ``none`` shows the list again, an empty
    answer cancels (None is returned). Invalid numbers are reported and the
    question is asked again.
    """
    while True:
        console.writeline(f"{_CYAN}{title}{_RESET}")
        for number, item in enumerate(items, start=1):
            console.writeline(f"  [{_YELLOW}{number}{_RESET}] {item}")
        answer = console.prompt("> ")
        if not answer:
            console.writeline("Cancelled.")
            return None
        if answer == "all":
            return _Selection(list(items), True)
        if answer == "none":
            continue
        try:
            chosen = parse_selection(answer, items)
        except InvalidSelection as exc:
            console.writeline(f"{_RED}Invalid number: {exc.token}{_RESET}")
            continue
        return _Selection(chosen, False)