""" Execute a shell command. """
import errno
import os
import subprocess
import sys

from command import Command, Outcome
from constants import PATH_SEPARATOR
from exceptions import ErrorKind, ShellError
from shell_builtins import BUILTINS
from shell_state import ShellState


def find_executable(name: str, state: ShellState) -> str | None:
    """
    Locate an external command.

    Names containing a slash are taken as a path as-is. Anything else is
    looked up in each PATH directory in order; an empty entry is the
    current directory. With PATH unset the default search path is used
    instead, never the current directory.
    """
    if PATH_SEPARATOR in name:
        return name

    search_path = state.get_var("PATH", None)
    if search_path is None:
        search_path = os.defpath

    for directory in search_path.split(os.pathsep):
        if directory == "":
            directory = state.cwd
        candidate = os.path.join(directory, name)
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def run_external(cmd: Command, state: ShellState) -> None:
    executable = find_executable(cmd.name, state)
    if executable is None:
        cause = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), cmd.name)
        raise ShellError(ErrorKind.IO_ERROR, f"{cmd.name}: command not found", cause)

    try:
        completed = subprocess.run(cmd.argv(), executable=executable, cwd=state.cwd)
    except (OSError, ValueError) as e:
        raise ShellError(ErrorKind.IO_ERROR, f"failed to execute command: {e}", e) from e

    if completed.returncode != 0:
        # killed by a signal: no exit code of its own
        code = completed.returncode if completed.returncode > 0 else 1
        print(f"error: command exited with code {code}", file=sys.stderr)
        raise ShellError(ErrorKind.COMMAND_FAILED, f"command exited with code {code}")


def dispatch(tokens: list[str], state: ShellState) -> Outcome:
    """ Run one tokenized command line: a builtin or an external program. """
    cmd = Command.from_tokens(tokens)
    if cmd is None:
        return Outcome.CONTINUE

    if cmd.name in BUILTINS:
        return BUILTINS[cmd.name](cmd.args, state)

    run_external(cmd, state)
    return Outcome.CONTINUE
