""" Errors raised while tokenizing or dispatching a command line. """
import enum


class ErrorKind(enum.Enum):
    MISMATCHED_QUOTES = "mismatched quotes"
    TOO_MANY_ARGS = "too many arguments"
    COMMAND_LINE_TOO_LONG = "command line too long"
    CD_FAILED = "cd failed"
    COMMAND_FAILED = "command failed"
    IO_ERROR = "i/o error"


class ShellError(Exception):
    """ A non-fatal failure of one command line. """
    def __init__(self, kind, message=None, cause=None):
        self.kind = kind
        self.message = message or kind.value
        self.cause = cause
        super().__init__(self.message)
