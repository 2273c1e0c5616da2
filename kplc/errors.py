"""Compile errors raised by the scanner and parser."""

from __future__ import annotations

from enum import Enum

from kplc.token import TokenType, token_to_string


class ErrorCode(Enum):
    """Kinds of compile error; each value is the message shown to the user."""

    END_OF_COMMENT = "End of comment expected!"
    IDENT_TOO_LONG = "Identification too long!"
    INVALID_CHAR_CONSTANT = "Invalid const char!"
    INVALID_SYMBOL = "Invalid symbol!"
    INVALID_CONSTANT = "Invalid constant!"
    INVALID_TYPE = "Invalid type!"
    INVALID_BASIC_TYPE = "Invalid basic type!"
    INVALID_PARAM = "Invalid parameter!"
    INVALID_STATEMENT = "Invalid statement!"
    INVALID_ARGUMENTS = "Invalid arguments!"
    INVALID_COMPARATOR = "Invalid comparator!"
    INVALID_EXPRESSION = "Invalid expression!"
    INVALID_TERM = "Invalid term!"
    INVALID_FACTOR = "Invalid factor!"

    @property
    def message(self) -> str:
        return self.value


class CompileError(Exception):
    """An error found at a position in the source; str() gives 'line-col:message'."""

    def __init__(self, code: ErrorCode, line_no: int, col_no: int) -> None:
        self.code: ErrorCode | None = code
        self.line_no = line_no
        self.col_no = col_no
        self.message = code.message
        super().__init__(f"{line_no}-{col_no}:{self.message}")


class MissingTokenError(CompileError):
    """An expected token was not found."""

    def __init__(self, token_type: TokenType, line_no: int, col_no: int) -> None:
        self.code = None
        self.token_type = token_type
        self.line_no = line_no
        self.col_no = col_no
        self.message = f"Missing {token_to_string(token_type)}"
        Exception.__init__(self, f"{line_no}-{col_no}:{self.message}")