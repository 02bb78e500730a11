"""Kind of grammar an ATN was built for."""

from enum import IntEnum


class ATNType(IntEnum):
    """Grammar type recorded in a serialized ATN."""

    LEXER = 0
    PARSER = 1