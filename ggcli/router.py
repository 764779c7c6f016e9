"""Command-line entry point and dispatch of subcommands."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from . import commands
from .branch import branch
from .console import Console
from .git import Git
from .interactive import interactive_ui
from .workflows import (
    add_commit_push,
    commit_push_interactive,
    pull_rebase_push,
    reset_clean,
    stash,
    stash_pull_pop,
)

VERSION = "v1.0.2"

_Handler = Callable[[Sequence[str], Git, Console], None]


def _without_args(action: Callable[[Git, Console], None]) -> _Handler:
    return lambda _args, git, console: action(git, console)


def _clean(args: Sequence[str], git: Git, console: Console) -> None:
    if args and args[0] == "interactive":
        commands.clean_interactive(git, console)
    else:
        commands.clean(args, git, console)


_ROUTES: dict[str, _Handler] = {
    "__complete": commands.complete,
    "branch": branch,
    "push": commands.push,
    "pull": commands.pull,
    "log": commands.log,
    "commit": commands.commit,
    "add": commands.add,
    "fetch": commands.fetch,
    "clean": _clean,
    "commit-push": _without_args(commit_push_interactive),
    "stash": stash,
    "rebase": commands.rebase,
    "remote": commands.remote,
    "add-commit-push": _without_args(add_commit_push),
    "pull-rebase-push": _without_args(pull_rebase_push),
    "stash-pull-pop": _without_args(stash_pull_pop),
    "reset-clean": _without_args(reset_clean),
}


def route(
    args: Sequence[str], git: Git | None = None, console: Console | None = None
) -> None:
    """Dispatch a full argument vector (program name first) to its command."""
    git = git if git is not None else Git()
    console = console if console is not None else Console()
    if len(args) < 2 or args[1] not in _ROUTES:
        commands.show_help(console)
        return
    _ROUTES[args[1]](list(args[2:]), git, console)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool with ``argv`` (defaults to the process arguments)."""
    argv = list(sys.argv[1:] if argv is None else argv)
    console = Console()
    if argv and argv[0] in ("--version", "-v"):
        console.writeline(f"ggc version {VERSION}")
        return 0
    if not argv:
        chosen = interactive_ui(console)
        if chosen is not None:
            route(chosen, console=console)
        return 0
    route(["ggc", *argv], console=console)
    return 0


if __name__ == "__main__":
    sys.exit(main())