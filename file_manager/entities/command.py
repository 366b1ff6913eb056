"""
Command entity: one parsed input line.
"""

from dataclasses import dataclass
from enum import Enum

from file_manager.exceptions import UserInputError

INVALID_INPUT = "Invalid input"


class CommandKind(Enum):
    """Closed set of commands understood by the file manager.

    Each member carries its verb, the number of positional arguments it needs
    and the message printed when they are missing.
    """

    UP = ("up", 0, "")
    CD = ("cd", 1, "Please provide a directory.")
    LS = ("ls", 0, "")
    CAT = ("cat", 1, "Please provide a file path.")
    ADD = ("add", 1, "Please provide a filename.")
    RN = ("rn", 2, "Please provide the current and new file names.")
    RM = ("rm", 1, "Please provide a file path.")
    EXIT = (".exit", 0, "")
    CP = ("cp", 2, "Please provide source and destination paths.")
    MV = ("mv", 2, "Please provide source and destination paths.")
    OS = ("os", 1, INVALID_INPUT)
    HASH = ("hash", 1, "Please provide a file path.")
    COMPRESS = ("compress", 2, "Please provide source and destination paths.")
    DECOMPRESS = ("decompress", 2, "Please provide source and destination paths.")

    def __init__(self, verb: str, arity: int, usage: str):
        self.verb = verb
        self.arity = arity
        self.usage = usage

    @classmethod
    def from_verb(cls, verb: str) -> "CommandKind":
        for kind in cls:
            if kind.verb == verb:
                return kind
        raise UserInputError(INVALID_INPUT)


@dataclass(frozen=True)
class Command:
    """Domain-level command typed by the user."""

    kind: CommandKind
    args: tuple[str, ...] = ()

    @property
    def first(self) -> str:
        return self.args[0]

    @property
    def second(self) -> str:
        return self.args[1]


def parse_command(raw: str) -> Command:
    """
    Parse a raw input line into a Command.

    Tokens are split on whitespace; the first one selects the command and the
    rest are positional arguments. Arguments beyond what the command needs
    are ignored.

    Raises:
        UserInputError: For an empty line, an unknown verb or missing arguments
    """
    tokens = raw.split()
    if not tokens:
        raise UserInputError(INVALID_INPUT)

    kind = CommandKind.from_verb(tokens[0])
    args = tuple(tokens[1:])
    if len(args) < kind.arity:
        raise UserInputError(kind.usage)
    return Command(kind=kind, args=args[: kind.arity])
