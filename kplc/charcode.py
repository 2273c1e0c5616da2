"""Classification of source characters into the classes the scanner uses."""

from __future__ import annotations

import string
from enum import Enum, auto


class CharCode(Enum):
    """Character class of a single source character."""

    SPACE = auto()
    LETTER = auto()
    DIGIT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EXCLAIMATION = auto()
    EQ = auto()
    COMMA = auto()
    PERIOD = auto()
    COLON = auto()
    SEMICOLON = auto()
    SINGLEQUOTE = auto()
    LPAR = auto()
    RPAR = auto()
    UNKNOWN = auto()


_SYMBOLS = {
    "!": CharCode.EXCLAIMATION,
    "'": CharCode.SINGLEQUOTE,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
    "*": CharCode.TIMES,
    "+": CharCode.PLUS,
    ",": CharCode.COMMA,
    "-": CharCode.MINUS,
    ".": CharCode.PERIOD,
    "/": CharCode.SLASH,
    ":": CharCode.COLON,
    ";": CharCode.SEMICOLON,
    "<": CharCode.LT,
    "=": CharCode.EQ,
    ">": CharCode.GT,
}

_TABLE: dict[str, CharCode] = {
    **{ch: CharCode.SPACE for ch in " \t\n\v\f\r"},
    **{ch: CharCode.LETTER for ch in string.ascii_letters},
    **{ch: CharCode.DIGIT for ch in string.digits},
    **_SYMBOLS,
}


def char_code(ch: str) -> CharCode:
    """Return the class of a single character; anything unlisted is UNKNOWN."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLE.get(ch, CharCode.UNKNOWN)