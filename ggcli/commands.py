"""Single-purpose subcommands: add, commit, fetch, log, pull, push and more."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .console import Console, InvalidSelection, choose_many, parse_selection
from .git import Git, GitError

_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"

_CLEAN_TITLE = (
    "Select files to delete by number "
    "(space separated, all: select all, none: deselect all, e.g. 1 3 5):"
)
_WOULD_REMOVE = "Would remove "

_HELP = """\
ggc: A Go-based CLI tool to streamline Git operations

Usage:
  ggc <command> [subcommand] [options]

Main Commands:
  ggc add <file>              Stage file(s)
  ggc branch current          Show current branch name
  ggc branch checkout         Interactive branch switch
  ggc push current            Push current branch
  ggc push force              Force push current branch
  ggc pull current            Pull current branch
  ggc pull rebase             Pull with rebase
  ggc log simple              Show simple log
  ggc log graph               Show log with graph
  ggc commit allow-empty      Create empty commit
  ggc commit tmp              Temporary commit
  ggc fetch --prune           Fetch with prune
  ggc clean files             Clean files
  ggc clean dirs              Clean directories
  ggc reset clean             Reset and clean
  ggc commit-push             Interactive add/commit/push

Examples:
  ggc add .
  ggc branch current
  ggc branch checkout
  ggc push current
  ggc push force
  ggc pull current
  ggc pull rebase
  ggc log simple
  ggc log graph
  ggc commit allow-empty
  ggc commit tmp
  ggc fetch --prune
  ggc clean files
  ggc clean dirs
  ggc reset clean
  ggc commit-push
"""


def _dispatch(
    args: Sequence[str],
    console: Console,
    actions: dict[str, Callable[[], None]],
    usage: str,
) -> None:
    """Run the action named by ``args[0]``, reporting git failures, or show usage."""
    if args and args[0] in actions:
        try:
            actions[args[0]]()
        except GitError as exc:
            console.writeline(f"Error: {exc}")
        return
    console.writeline(usage)


def add(args: Sequence[str], git: Git, console: Console) -> None:
    """Stage the given paths, or run ``git add -p`` for ``-p``."""
    if not args:
        console.writeline("Usage: ggc add <file> | ggc add -p")
        return
    git_args = ["-p"] if len(args) == 1 and args[0] == "-p" else list(args)
    try:
        git.run("add", *git_args)
    except GitError as exc:
        console.writeline(f"error: {exc}")


def commit(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(
        args,
        console,
        {"allow-empty": git.commit_allow_empty, "tmp": git.commit_tmp},
        "Usage: ggc commit allow-empty | ggc commit tmp",
    )


def fetch(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(args, console, {"--prune": git.fetch_prune}, "Usage: ggc fetch --prune")


def log(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(
        args,
        console,
        {"simple": git.log_simple, "graph": git.log_graph},
        "Usage: ggc log simple | ggc log graph",
    )


def pull(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(
        args,
        console,
        {"current": git.pull_current_branch, "rebase": git.pull_rebase_current_branch},
        "Usage: ggc pull current | ggc pull rebase",
    )


def push(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(
        args,
        console,
        {"current": git.push_current_branch, "force": git.push_force_current_branch},
        "Usage: ggc push current | ggc push force",
    )


def reset(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(args, console, {"clean": git.reset_clean}, "Usage: ggc reset clean")


def _remote_change(
    git: Git, console: Console, git_args: Sequence[str], failure: str, success: str
) -> None:
    try:
        git.run("remote", *git_args, quiet=True)
    except GitError as exc:
        console.writeline(f"Error: failed to {failure}: {exc}")
        return
    console.writeline(success)


def remote(args: Sequence[str], git: Git, console: Console) -> None:
    """List, add, remove or re-point remotes."""
    action = args[0] if args else None
    if action == "list":
        try:
            output = git.run("remote", "-v", capture=True)
        except GitError as exc:
            console.writeline(f"Error: failed to get git remote -v: {exc}")
            return
        console.write(output)
    elif action == "add":
        if len(args) < 3:
            console.writeline("Usage: ggc remote add <name> <url>")
            return
        name, url = args[1], args[2]
        _remote_change(git, console, ["add", name, url], "add remote", f"Remote '{name}' added")
    elif action == "remove":
        if len(args) < 2:
            console.writeline("Usage: ggc remote remove <name>")
            return
        name = args[1]
        _remote_change(
            git, console, ["remove", name], "remove remote", f"Remote '{name}' removed"
        )
    elif action == "set-url":
        if len(args) < 3:
            console.writeline("Usage: ggc remote set-url <name> <url>")
            return
        name, url = args[1], args[2]
        _remote_change(
            git,
            console,
            ["set-url", name, url],
            "set remote URL",
            f"Remote '{name}' URL updated",
        )
    else:
        console.writeline(
            "Usage: ggc remote list | ggc remote add <name> <url>"
            " | ggc remote remove <name> | ggc remote set-url <name> <url>"
        )


def rebase(args: Sequence[str], git: Git, console: Console) -> None:
    if args and args[0] == "interactive":
        rebase_interactive(git, console)
        return
    console.writeline("Usage: ggc rebase interactive")


def rebase_interactive(git: Git, console: Console) -> None:
    """Pick one of the last ten commits and rebase interactively up to it."""
    try:
        output = git.run("log", "--oneline", "-n", "10", capture=True)
    except GitError as exc:
        console.writeline(f"error: failed to get git log: {exc}")
        return
    text = output.strip()
    if not text:
        console.writeline("No commit history found")
        return
    commits = text.split("\n")
    console.writeline("Where do you want to rebase up to? Select a number (e.g., 3):")
    for number, line in enumerate(commits, start=1):
        console.writeline(f"  [{number}] {line}")
    answer = console.prompt("> ")
    if not answer:
        console.writeline("Cancelled")
        return
    tokens = answer.split()
    try:
        if len(tokens) != 1:
            raise InvalidSelection(answer)
        chosen = parse_selection(answer, commits)[0]
    except InvalidSelection:
        console.writeline("Invalid number")
        return
    depth = commits.index(chosen) + 1 if commits.count(chosen) == 1 else int(answer)
    try:
        git.run("rebase", "-i", f"HEAD~{depth}")
    except GitError as exc:
        console.writeline(f"error: git rebase failed: {exc}")


def clean(args: Sequence[str], git: Git, console: Console) -> None:
    _dispatch(
        args,
        console,
        {"files": git.clean_files, "dirs": git.clean_dirs},
        "Usage: ggc clean files | ggc clean dirs",
    )


def _remove(git: Git, console: Console, files: Sequence[str]) -> bool:
    try:
        git.run("clean", "-f", "--", *files)
    except GitError as exc:
        console.writeline(f"Error: failed to clean files: {exc}")
        return False
    console.writeline("Selected files deleted.")
    return True


def clean_interactive(git: Git, console: Console) -> None:
    """Pick untracked files reported by ``git clean -nd`` and remove them."""
    try:
        output = git.run("clean", "-nd", capture=True)
    except GitError as exc:
        console.writeline(f"Error: failed to get candidates with git clean -nd: {exc}")
        return
    files = [
        line.removeprefix(_WOULD_REMOVE)
        for line in output.strip().split("\n")
        if line.startswith(_WOULD_REMOVE)
    ]
    if not files:
        console.writeline("No files to clean.")
        return
    while True:
        selection = choose_many(console, _CLEAN_TITLE, files)
        if selection is None:
            return
        if selection.everything:
            _remove(git, console, files)
            return
        if not selection.items:
            console.writeline(f"{_YELLOW}Nothing selected.{_RESET}")
            continue
        console.writeline(f"{_GREEN}Selected files: [{' '.join(selection.items)}]{_RESET}")
        answer = console.prompt("Delete these files? (y/n): ")
        if answer in ("y", "Y"):
            _remove(git, console, selection.items)
            return


def complete(args: Sequence[str], git: Git, console: Console) -> None:
    """Print completion candidates for ``branch`` or ``files``."""
    if not args:
        return
    try:
        if args[0] == "branch":
            candidates = git.local_branches()
        elif args[0] == "files":
            candidates = git.run("ls-files", capture=True).strip().split("\n")
        else:
            return
    except GitError:
        return
    for candidate in candidates:
        console.writeline(candidate)


def show_help(console: Console) -> None:
    console.write(_HELP)