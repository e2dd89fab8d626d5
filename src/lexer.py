""" Lexical analysis for shell commands. """
from constants import MAX_ARGS, MAX_CMD_LENGTH
from exceptions import ErrorKind, ShellError


def tokenize(line: str) -> list[str]:
    """
    Split a command line into words.

    Single and double quotes group characters (including spaces) into one
    word and are themselves dropped. A quote of one kind inside the other
    kind is literal. Unquoted spaces separate words; runs of them collapse.
    """
    if len(line) > MAX_CMD_LENGTH:
        raise ShellError(ErrorKind.COMMAND_LINE_TOO_LONG)

    tokens = []
    current = ""
    in_single_quotes = False
    in_double_quotes = False

    for ch in line:
        if ch == "'" and not in_double_quotes:
            in_single_quotes = not in_single_quotes
        elif ch == '"' and not in_single_quotes:
            in_double_quotes = not in_double_quotes
        elif ch == " " and not (in_single_quotes or in_double_quotes):
            if current:
                tokens.append(current)
                current = ""
        else:
            current += ch

    if in_single_quotes or in_double_quotes:
        raise ShellError(ErrorKind.MISMATCHED_QUOTES)

    if current:
        tokens.append(current)

    if len(tokens) > MAX_ARGS:
        raise ShellError(ErrorKind.TOO_MANY_ARGS)

    return tokens
