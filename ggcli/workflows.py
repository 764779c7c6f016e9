"""Multi-step git workflows: add/commit/push, stash/pull/pop and friends."""

from __future__ import annotations

from collections.abc import Sequence

from .console import Console, choose_many
from .git import Git, GitError

_GREEN = "\033[1;32m"
_RESET = "\033[0m"

_ADD_TITLE = (
    "Select files to add by number "
    "(space separated, all: select all, none: deselect all, e.g. 1 3 5):"
)


def _commit_and_push(git: Git, console: Console, done: str) -> None:
    console.write("\n\r")
    message = console.prompt("Enter commit message: ")
    if not message:
        console.writeline("Cancelled.")
        return
    try:
        git.run("commit", "-m", message)
    except GitError as exc:
        console.writeline(f"Error: failed to commit: {exc}")
        return
    try:
        branch = git.current_branch()
    except GitError as exc:
        console.writeline(f"Error: failed to get branch name: {exc}")
        return
    try:
        git.run("push", "origin", branch)
    except GitError as exc:
        console.writeline(f"Error: failed to push: {exc}")
        return
    console.writeline(done)


def add_commit_push(git: Git, console: Console) -> None:
    """Stage everything, ask for a message, commit and push the current branch."""
    try:
        git.run("add", ".")
    except GitError as exc:
        console.writeline(f"Error: failed to add all files: {exc}")
        return
    _commit_and_push(git, console, "add→commit→push done")


def _changed_files(output: str) -> list[str]:
    return [line[2:].strip() for line in output.strip().split("\n") if len(line) >= 4]


def _stage(git: Git, console: Console, files: Sequence[str]) -> bool:
    try:
        git.run("add", *files)
    except GitError as exc:
        console.writeline(f"Error: failed to add files: {exc}")
        return False
    return True


def commit_push_interactive(git: Git, console: Console) -> None:
    """Pick changed files to stage, then commit and push them."""
    try:
        output = git.run("status", "--porcelain", capture=True)
    except GitError as exc:
        console.writeline(f"Error: failed to get git status: {exc}")
        return
    if not output.strip():
        console.writeline("No changed files.")
        return
    files = _changed_files(output)
    if not files:
        console.writeline("No files to stage.")
        return
    while True:
        selection = choose_many(console, _ADD_TITLE, files)
        if selection is None:
            return
        if selection.everything:
            if not _stage(git, console, files):
                return
            break
        console.writeline(f"{_GREEN}Selected files: [{' '.join(selection.items)}]{_RESET}")
        answer = console.prompt("Add these files? (y/n): ")
        if answer in ("y", "Y"):
            if not _stage(git, console, selection.items):
                return
            break
    _commit_and_push(git, console, "Done!")


def pull_rebase_push(git: Git, console: Console) -> None:
    """Pull the current branch, rebase onto origin/main and push."""
    try:
        branch = git.current_branch()
    except GitError as exc:
        console.writeline(f"Error: Failed to get branch name: {exc}")
        return
    steps = [
        (("pull", "origin", branch), "git pull"),
        (("rebase", "origin/main"), "git rebase"),
        (("push", "origin", branch), "git push"),
    ]
    for args, label in steps:
        try:
            git.run(*args, quiet=True)
        except GitError as exc:
            console.writeline(f"Error: Failed to {label}: {exc}")
            return
    console.writeline("pull→rebase→push completed")


def stash_pull_pop(git: Git, console: Console) -> None:
    """Stash local changes, pull the current branch and restore the stash."""
    try:
        git.run("stash", quiet=True)
    except GitError as exc:
        console.writeline(f"error: failed to git stash: {exc}")
        return
    try:
        branch = git.current_branch()
    except GitError as exc:
        console.writeline(f"error: failed to get branch name: {exc}")
        return
    try:
        git.run("pull", "origin", branch, quiet=True)
    except GitError as exc:
        console.writeline(f"error: failed to git pull: {exc}")
        return
    try:
        git.run("stash", "pop", quiet=True)
    except GitError as exc:
        console.writeline(f"error: failed to git stash pop: {exc}")
        return
    console.writeline("stash→pull→pop done")


def reset_clean(git: Git, console: Console) -> None:
    """Hard-reset to HEAD and remove untracked files and directories."""
    try:
        git.run("reset", "--hard", "HEAD", quiet=True)
    except GitError as exc:
        console.writeline(f"Error: git reset --hard HEAD failed: {exc}")
        return
    try:
        git.run("clean", "-fd", quiet=True)
    except GitError as exc:
        console.writeline(f"Error: git clean -fd failed: {exc}")
        return
    console.writeline("reset --hard HEAD and clean -fd done")


def stash(args: Sequence[str], git: Git, console: Console) -> None:
    """``ggc stash trash``: stage everything and stash it away."""
    if not args or args[0] != "trash":
        show_stash_help(console)
        return
    try:
        git.run("add", ".", quiet=True)
    except GitError as exc:
        console.writeline(f"Error: failed to add all files: {exc}")
        return
    try:
        git.run("stash", quiet=True)
    except GitError as exc:
        console.writeline(f"Error: failed to stash: {exc}")
        return
    console.writeline("add . → stash done")


def show_stash_help(console: Console) -> None:
    console.writeline("Usage: ggc stash trash")