"""The ``branch`` command: show, switch and delete branches."""

from __future__ import annotations

from collections.abc import Sequence

from .console import Console, InvalidSelection, choose_many, choose_one
from .git import Git, GitError

_DELETE_TITLE = (
    "Select local branches to delete by number "
    "(space separated, all: select all, none: deselect all, e.g. 1 3 5):"
)
_DELETE_MERGED_TITLE = (
    "Select merged local branches to delete by number "
    "(space separated, all: select all, none: deselect all, e.g. 1 3 5):"
)


def branch(args: Sequence[str], git: Git, console: Console) -> None:
    """Dispatch ``ggc branch <subcommand>``."""
    actions = {
        "checkout": checkout,
        "checkout-remote": checkout_remote,
        "delete": delete,
        "delete-merged": delete_merged,
    }
    if len(args) == 1 and args[0] == "current":
        try:
            console.writeline(git.current_branch())
        except GitError as exc:
            console.writeline(f"Error: {exc}")
        return
    if len(args) == 1 and args[0] in actions:
        actions[args[0]](git, console)
        return
    show_branch_help(console)


def _pick(console: Console, title: str, branches: Sequence[str]) -> str | None:
    try:
        index = choose_one(console, title, branches, "Enter the number to checkout: ")
    except InvalidSelection:
        index = None
    if index is None:
        console.writeline("Invalid number.")
        return None
    return branches[index]


def checkout(git: Git, console: Console) -> None:
    """Switch to a local branch picked from a numbered list."""
    try:
        branches = git.local_branches()
    except GitError as exc:
        console.writeline(f"Error: {exc}")
        return
    if not branches:
        console.writeline("No local branches found.")
        return
    chosen = _pick(console, "Local branches:", branches)
    if chosen is None:
        return
    try:
        git.run("checkout", chosen)
    except GitError as exc:
        console.writeline(f"Error: {exc}")


def checkout_remote(git: Git, console: Console) -> None:
    """Create a local tracking branch for a picked remote branch."""
    try:
        branches = git.remote_branches()
    except GitError as exc:
        console.writeline(f"Error: {exc}")
        return
    if not branches:
        console.writeline("No remote branches found.")
        return
    remote_branch = _pick(console, "Remote branches:", branches)
    if remote_branch is None:
        return
    _, slash, local_branch = remote_branch.partition("/")
    if not slash:
        console.writeline("Invalid remote branch name.")
        return
    try:
        git.run("checkout", "-b", local_branch, "--track", remote_branch)
    except GitError as exc:
        console.writeline(f"Error: {exc}")


def _delete_chosen(
    git: Git, console: Console, title: str, branches: Sequence[str], done: str
) -> None:
    selection = choose_many(console, title, branches)
    if selection is None or selection.everything:
        return
    for name in selection.items:
        try:
            git.run("branch", "-d", name)
        except GitError as exc:
            console.writeline(f"Error: failed to delete {name}: {exc}")
    console.writeline(done)


def delete(git: Git, console: Console) -> None:
    """Delete local branches picked by number."""
    try:
        branches = git.local_branches()
    except GitError as exc:
        console.writeline(f"Error: {exc}")
        return
    if not branches:
        console.writeline("No local branches found.")
        return
    _delete_chosen(git, console, _DELETE_TITLE, branches, "Selected branches deleted.")


def delete_merged(git: Git, console: Console) -> None:
    """Delete branches already merged into the current one, picked by number."""
    try:
        current = git.current_branch()
    except GitError as exc:
        console.writeline(f"Error: failed to get current branch: {exc}")
        return
    try:
        output = git.run("branch", "--merged", capture=True)
    except GitError as exc:
        console.writeline(f"Error: failed to get merged branches: {exc}")
        return
    branches = []
    for line in output.strip().split("\n"):
        name = line.removeprefix("* ").strip()
        if name and name != current:
            branches.append(name)
    if not branches:
        console.writeline("No merged local branches.")
        return
    _delete_chosen(
        git, console, _DELETE_MERGED_TITLE, branches, "Selected merged branches deleted."
    )


def show_branch_help(console: Console) -> None:
    console.writeline(
        "Usage: ggc branch current | ggc branch checkout | ggc branch checkout-remote"
        " | ggc branch delete | ggc branch delete-merged"
    )