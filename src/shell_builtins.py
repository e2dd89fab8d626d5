""" Registry of builtin commands. """
from command import Outcome
from exceptions import ErrorKind, ShellError

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(args, state):
    if len(args) != 1:
        raise ShellError(ErrorKind.CD_FAILED, "cd requires exactly one argument")

    target = args[0]
    try:
        state.change_dir(target)
    except FileNotFoundError as e:
        raise ShellError(ErrorKind.CD_FAILED, f"cd failed: no such file or directory: {target}", e) from e
    except NotADirectoryError as e:
        raise ShellError(ErrorKind.CD_FAILED, f"cd failed: not a directory: {target}", e) from e
    except OSError as e:
        raise ShellError(ErrorKind.CD_FAILED, f"cd failed: {e.strerror or e}: {target}", e) from e
    except ValueError as e:
        raise ShellError(ErrorKind.CD_FAILED, f"cd failed: {e}", e) from e
    return Outcome.CONTINUE


@builtin("exit")
def builtin_exit(args, state):
    # arguments are accepted and ignored; the session always ends with 0
    return Outcome.EXIT
