""" Implement the core of the shell. """
import sys

from command import Outcome
from constants import DEFAULT_PROMPT
from exceptions import ErrorKind, ShellError
from lexer import tokenize
from runner import dispatch
from shell_state import ShellState


def read_line(prompt=DEFAULT_PROMPT):
    """ Prompt on stderr and read one line from stdin. """
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if line == "":
        raise EOFError
    return line


def report_error(err: ShellError):
    # the runner already printed the exit code
    if err.kind is ErrorKind.COMMAND_FAILED:
        return
    print(f"error: {err.message}", file=sys.stderr)


def run_line(line: str, state: ShellState) -> Outcome:
    """ Tokenize and dispatch one line, reporting any failure. """
    line = line.strip()
    if not line:
        return Outcome.CONTINUE

    try:
        outcome = dispatch(tokenize(line), state)
    except ShellError as e:
        report_error(e)
        state.set_status(1)
        return Outcome.CONTINUE

    state.set_status(0)
    return outcome


class Shell:
    def __init__(self, prompt=DEFAULT_PROMPT, state=None):
        self.prompt = prompt
        self.state = state if state is not None else ShellState()

    def run(self):
        while True:
            try:
                line = read_line(self.prompt)
                if run_line(line, self.state) is Outcome.EXIT:
                    return 0

            except EOFError:
                print(file=sys.stderr)
                return 0

            except KeyboardInterrupt:
                print(file=sys.stderr)
