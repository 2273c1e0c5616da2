"""Token types, tokens and keyword lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

MAX_IDENT_LEN = 15


class TokenType(Enum):
    """Kind of a lexical token."""

    TK_NONE = auto()
    TK_IDENT = auto()
    TK_NUMBER = auto()
    TK_CHAR = auto()
    TK_EOF = auto()

    KW_PROGRAM = auto()
    KW_CONST = auto()
    KW_TYPE = auto()
    KW_VAR = auto()
    KW_INTEGER = auto()
    KW_CHAR = auto()
    KW_ARRAY = auto()
    KW_OF = auto()
    KW_FUNCTION = auto()
    KW_PROCEDURE = auto()
    KW_BEGIN = auto()
    KW_END = auto()
    KW_CALL = auto()
    KW_IF = auto()
    KW_THEN = auto()
    KW_ELSE = auto()
    KW_WHILE = auto()
    KW_DO = auto()
    KW_FOR = auto()
    KW_TO = auto()

    SB_SEMICOLON = auto()
    SB_COLON = auto()
    SB_PERIOD = auto()
    SB_COMMA = auto()
    SB_ASSIGN = auto()
    SB_EQ = auto()
    SB_NEQ = auto()
    SB_LT = auto()
    SB_LE = auto()
    SB_GT = auto()
    SB_GE = auto()
    SB_PLUS = auto()
    SB_MINUS = auto()
    SB_TIMES = auto()
    SB_SLASH = auto()
    SB_LPAR = auto()
    SB_RPAR = auto()
    SB_LSEL = auto()
    SB_RSEL = auto()


@dataclass
class Token:
    """A token with its position in the source."""

    token_type: TokenType
    line_no: int
    col_no: int
    string: str = ""
    value: int = 0


KEYWORDS: dict[str, TokenType] = {
    member.name[3:]: member for member in TokenType if member.name.startswith("KW_")
}

_ASCII_UPPER = {code: code - 32 for code in range(ord("a"), ord("z") + 1)}


def check_keyword(string: str) -> TokenType:
    """Return the keyword type for ``string`` (case-insensitive) or TK_NONE."""
    return KEYWORDS.get(string.translate(_ASCII_UPPER), TokenType.TK_NONE)


_DESCRIPTIONS: dict[TokenType, str] = {
    TokenType.TK_NONE: "None",
    TokenType.TK_IDENT: "an identification",
    TokenType.TK_NUMBER: "a number",
    TokenType.TK_CHAR: "a constant char",
    TokenType.TK_EOF: "end of file",
    **{kind: f"keyword {word}" for word, kind in KEYWORDS.items()},
    TokenType.SB_SEMICOLON: "';'",
    TokenType.SB_COLON: "':'",
    TokenType.SB_PERIOD: "'.'",
    TokenType.SB_COMMA: "','",
    TokenType.SB_ASSIGN: "':='",
    TokenType.SB_EQ: "'='",
    TokenType.SB_NEQ: "'!='",
    TokenType.SB_LT: "'<'",
    TokenType.SB_LE: "'<='",
    TokenType.SB_GT: "'>'",
    TokenType.SB_GE: "'>='",
    TokenType.SB_PLUS: "'+'",
    TokenType.SB_MINUS: "'-'",
    TokenType.SB_TIMES: "'*'",
    TokenType.SB_SLASH: "'/'",
    TokenType.SB_LPAR: "'('",
    TokenType.SB_RPAR: "')'",
    TokenType.SB_LSEL: "'(.'",
    TokenType.SB_RSEL: "'.)'",
}


def token_to_string(token_type: TokenType) -> str:
    """Return a human-readable description of a token type."""
    return _DESCRIPTIONS.get(token_type, "")