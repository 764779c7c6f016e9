import io

import pytest

from ggcli.console import Console
from ggcli.git import Git
from ggcli.router import main, route


class Recorder:
    def __init__(self, outputs=None):
        self.calls = []
        self.outputs = outputs or {}

    def __call__(self, argv, capture=False, quiet=False):
        self.calls.append(list(argv))
        return self.outputs.get(tuple(argv), "")


def make(outputs=None, stdin=""):
    runner = Recorder(outputs)
    out = io.StringIO()
    return runner, Git(runner), Console(io.StringIO(stdin), out), out


BRANCH = ("git", "rev-parse", "--abbrev-ref", "HEAD")


def test_no_subcommand_shows_help():
    runner, git, console, out = make()
    route(["ggc"], git, console)
    assert "Main Commands:" in out.getvalue()
    assert runner.calls == []


def test_unknown_subcommand_shows_help():
    runner, git, console, out = make()
    route(["ggc", "bogus"], git, console)
    assert out.getvalue().startswith("ggc: A Go-based CLI tool")
    assert runner.calls == []


def test_push_current_routes_to_git():
    runner, git, console, _ = make({BRANCH: "main\n"})
    route(["ggc", "push", "current"], git, console)
    assert runner.calls[-1] == ["git", "push", "origin", "main"]


def test_pull_rebase_routes_to_git():
    runner, git, console, _ = make({BRANCH: "main\n"})
    route(["ggc", "pull", "rebase"], git, console)
    assert runner.calls[-1] == ["git", "pull", "--rebase", "origin", "main"]


def test_reset_clean_sequence():
    runner, git, console, out = make()
    route(["ggc", "reset-clean"], git, console)
    assert runner.calls == [["git", "reset", "--hard", "HEAD"], ["git", "clean", "-fd"]]
    assert out.getvalue() == "reset --hard HEAD and clean -fd done\n"


def test_clean_files_routes():
    runner, git, console, _ = make()
    route(["ggc", "clean", "files"], git, console)
    assert runner.calls == [["git", "clean", "-f"]]


def test_clean_interactive_routes_to_picker():
    runner, git, console, out = make({("git", "clean", "-nd"): "Would remove a.txt\n"})
    route(["ggc", "clean", "interactive"], git, console)
    assert runner.calls == [["git", "clean", "-nd"]]
    assert out.getvalue().endswith("Cancelled.\n")


def test_complete_branch_lists_branches():
    outputs = {("git", "branch", "--format", "%(refname:short)"): "main\ndev\n"}
    runner, git, console, out = make(outputs)
    route(["ggc", "__complete", "branch"], git, console)
    assert out.getvalue() == "main\ndev\n"


def test_remote_add_routes():
    runner, git, console, out = make()
    route(["ggc", "remote", "add", "origin", "u"], git, console)
    assert runner.calls == [["git", "remote", "add", "origin", "u"]]
    assert out.getvalue() == "Remote 'origin' added\n"


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_main_version(flag, capsys):
    assert main([flag]) == 0
    assert capsys.readouterr().out == "ggc version v1.0.2\n"


def test_main_unknown_command_prints_help(capsys):
    assert main(["bogus"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_help_without_arguments_for_stash(capsys):
    assert main(["stash"]) == 0
    assert capsys.readouterr().out == "Usage: ggc stash trash\n"