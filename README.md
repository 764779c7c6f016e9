# ggcli

`ggc` is a small command-line helper for everyday Git work. It wraps common
sequences into short commands. These include pushing the current branch, pulling
with rebase, add/commit/push, and cleaning up merged branches. When started with
no arguments, it offers an interactive picker.

Every command runs the `git` executable, so Git must be installed and on your
`PATH`.

## Installation

```
pip install .
```

This installs the `ggc` command.

## Usage

```
ggc add <file>...             git add <file>...
ggc add -p                    git add -p (stage by hunk)
ggc branch current            Print the current branch name
ggc branch checkout           Pick a local branch by number and check it out
ggc branch checkout-remote    Pick a remote branch and create a tracking branch
ggc branch delete             Pick local branches to delete (git branch -d)
ggc branch delete-merged      Pick branches merged into the current one to delete
ggc push current              git push origin <current branch>
ggc push force                git push --force origin <current branch>
ggc pull current              git pull origin <current branch>
ggc pull rebase               git pull --rebase origin <current branch>
ggc log simple                git log --oneline
ggc log graph                 git log --graph
ggc commit allow-empty        git commit --allow-empty -m "empty commit"
ggc commit tmp                git commit -m "tmp"
ggc fetch --prune             git fetch --prune
ggc clean files               git clean -f
ggc clean dirs                git clean -d
ggc clean interactive         Pick untracked files reported by git clean -nd and remove them
ggc reset clean               git reset --hard HEAD, then git clean -fd
ggc commit-push               Pick changed files to stage, then commit and push
ggc add-commit-push           git add ., ask for a message, commit, push
ggc pull-rebase-push          Pull the current branch, rebase onto origin/main, push
ggc stash trash               git add ., then git stash
ggc stash-pull-pop            git stash, pull the current branch, git stash pop
ggc reset-clean               git reset --hard HEAD, then git clean -fd
ggc rebase interactive        Pick one of the last 10 commits; git rebase -i HEAD~N
ggc remote list               git remote -v
ggc remote add <name> <url>   Add a remote
ggc remote remove <name>      Remove a remote
ggc remote set-url <name> <url>
ggc --version                 Print "ggc version v1.0.2" (also -v)
```

An unknown command, or a command without a recognised subcommand, prints usage
text instead.

All pushes and pulls go to the remote named `origin`. `ggc checkout-remote`
turns `origin/feature/foo` into a local `feature/foo` that tracks it. Some
commands run quietly, which means Git's own output is discarded and only the
result or an error is printed:

- `pull-rebase-push`
- `stash trash`
- `stash-pull-pop`
- `reset-clean`
- `remote add`
- `remote remove`
- `remote set-url`

### Number prompts

Prompts that accept several numbers take them separated by spaces, as in `1 3 5`:

- An empty line cancels.
- `none` shows the list again.
- Any invalid number is reported, and the list is shown again.
- `all` selects every entry, with one exception. In `branch delete` and
  `branch delete-merged` it leaves without deleting anything.

In `commit-push` and `clean interactive`, a selection by numbers is confirmed
with `y` or `Y` before anything is staged or removed. Any other answer shows
the list again.

### Interactive picker

Running `ggc` with no arguments clears the screen and shows a searchable list of
commands:

- Type to filter the list. It shows commands containing the typed text.
- Backspace deletes a character.
- `Ctrl+N` and `Ctrl+P` move the highlight.
- `Enter` runs the highlighted command.

Pressing `Enter` when nothing matches leaves without running anything. With an
empty search, `Enter` picks the first command.

Commands with placeholders such as `<name>` or `<url>` prompt for each value
before running.

## Shell completion

These commands print one entry per line, for use in completion scripts:

- `ggc __complete branch` prints the local branch names.
- `ggc __complete files` prints the files tracked by `git ls-files`.

## Using it from Python

`ggcli.git.Git` wraps the operations above. It accepts an optional runner,
which is called as `runner(argv, capture=..., quiet=...)` and returns the
captured output as a string. Git failures raise `ggcli.git.GitError`, which
carries `argv` and `returncode`. `ggcli.router.route(["ggc", "push", "current"])`
dispatches a full argument vector the same way the command line does.

## Limitations

- The interactive picker needs a POSIX terminal (`termios`). On other platforms,
  or when standard input is not a terminal, it reports that raw mode could not be
  set and exits.
- In the picker, `Ctrl+C` is not handled.
- The remote is always `origin`, and `pull-rebase-push` always rebases onto
  `origin/main`. Neither can be configured.
- There is no configuration file and no custom command aliases.

## Development

```
pip install -e ".[test]"
pytest
```