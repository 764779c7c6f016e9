"""Thin wrapper around the ``git`` executable."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence

Runner = Callable[..., str]


class GitError(Exception):
    """Raised when a git command cannot be started or exits with an error."""

    def __init__(self, argv: Sequence[str], message: str, returncode: int | None = None):
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode


def run_command(argv: Sequence[str], capture: bool = False, quiet: bool = False) -> str:
    """Run ``argv`` and return its standard output when ``capture`` is set.

    Without ``capture`` the command shares the terminal, unless ``quiet``
    is set, in which case its output is discarded.
    """
    if capture:
        stdout, stderr = subprocess.PIPE, subprocess.DEVNULL
    elif quiet:
        stdout = stderr = subprocess.DEVNULL
    else:
        stdout = stderr = None
    try:
        completed = subprocess.run(
            list(argv),
            stdout=stdout,
            stderr=stderr,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitError(argv, str(exc)) from exc
    if completed.returncode != 0:
        raise GitError(argv, f"exit status {completed.returncode}", completed.returncode)
    return completed.stdout if capture else ""


def _lines(output: str) -> list[str]:
    text = output.strip()
    return text.split("\n") if text else []


class Git:
    """High-level git operations built on a command runner."""

    def __init__(self, runner: Runner | None = None):
        self._runner = runner if runner is not None else run_command

    def run(self, *args: str, capture: bool = False, quiet: bool = False) -> str:
        """Run ``git`` with ``args``; return captured output or an empty string."""
        return self._runner(["git", *args], capture=capture, quiet=quiet)

    def current_branch(self) -> str:
        return self.run("rev-parse", "--abbrev-ref", "HEAD", capture=True).strip()

    def local_branches(self) -> list[str]:
        return _lines(self.run("branch", "--format", "%(refname:short)", capture=True))

    def remote_branches(self) -> list[str]:
        """Remote branches, without symbolic refs such as ``origin/HEAD -> origin/main``."""
        output = self.run("branch", "-r", "--format", "%(refname:short)", capture=True)
        return [line.strip() for line in _lines(output) if "->" not in line]

    def clean_files(self) -> None:
        self.run("clean", "-f")

    def clean_dirs(self) -> None:
        self.run("clean", "-d")

    def commit_allow_empty(self) -> None:
        self.run("commit", "--allow-empty", "-m", "empty commit")

    def commit_tmp(self) -> None:
        self.run("commit", "-m", "tmp")

    def fetch_prune(self) -> None:
        self.run("fetch", "--prune")

    def log_simple(self) -> None:
        self.run("log", "--oneline")

    def log_graph(self) -> None:
        self.run("log", "--graph")

    def pull_current_branch(self) -> None:
        branch = self.current_branch()
        self.run("pull", "origin", branch)

    def pull_rebase_current_branch(self) -> None:
        branch = self.current_branch()
        self.run("pull", "--rebase", "origin", branch)

    def push_current_branch(self) -> None:
        branch = self.current_branch()
        self.run("push", "origin", branch)

    def push_force_current_branch(self) -> None:
        branch = self.current_branch()
        self.run("push", "--force", "origin", branch)

    def reset_clean(self) -> None:
        self.run("reset", "--hard", "HEAD")
        self.run("clean", "-fd")