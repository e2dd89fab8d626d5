""" Command to be executed. """
import enum


class Outcome(enum.Enum):
    """ What the driving loop should do after a command. """
    CONTINUE = "continue"
    EXIT = "exit"


class Command:
    def __init__(self, name, args):
        self.name = name
        self.args = args

    @classmethod
    def from_tokens(cls, tokens: list[str]) -> "Command | None":
        if not tokens:
            return None
        return cls(tokens[0], list(tokens[1:]))

    def argv(self) -> list[str]:
        return [self.name] + self.args
