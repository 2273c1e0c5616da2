"""Stand-alone token lister: prints every token of a source file."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from kplc.charcode import CharCode, char_code
from kplc.errors import CompileError, ErrorCode
from kplc.reader import CharReader
from kplc.scanner import format_token
from kplc.token import Token, TokenType, check_keyword

_MAX_WORD = 20

_SINGLE: dict[CharCode, TokenType] = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.SLASH: TokenType.SB_SLASH,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.RPAR: TokenType.SB_RPAR,
}


def _is_alnum(ch: str | None) -> bool:
    return ch is not None and ch.isascii() and ch.isalnum()


def _is_digit(ch: str | None) -> bool:
    return ch is not None and ch in "0123456789"


class _Lexer:
    """Tokenizer used by the token lister, with its own positioning rules."""

    def __init__(self, reader: CharReader) -> None:
        self._reader = reader

    def _code(self) -> CharCode | None:
        ch = self._reader.current_char
        return None if ch is None else char_code(ch)

    def _skip_comment(self) -> None:
        reader = self._reader
        while True:
            if self._code() is CharCode.TIMES:
                reader.read_char()
                if self._code() is CharCode.RPAR:
                    reader.read_char()
                    reader.read_char()
                    return
            reader.read_char()
            if reader.current_char is None:
                raise CompileError(ErrorCode.END_OF_COMMENT, reader.line_no, reader.col_no)

    def _read_ident_keyword(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        chars: list[str] = []
        while _is_alnum(reader.current_char):
            if len(chars) >= _MAX_WORD:
                raise CompileError(ErrorCode.IDENT_TOO_LONG, line_no, col_no)
            chars.append(reader.current_char)
            reader.read_char()
        word = "".join(chars)
        kind = check_keyword(word)
        if kind is TokenType.TK_NONE:
            kind = TokenType.TK_IDENT
        return Token(kind, line_no, col_no, word)

    def _read_number(self) -> Token:
        reader = self._reader
        col_no = reader.col_no
        digits: list[str] = []
        while _is_digit(reader.current_char):
            digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits)
        # The line is taken after the digits are consumed.
        return Token(TokenType.TK_NUMBER, reader.line_no, col_no, text, int(text))

    def _read_const_char(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        value = reader.current_char or ""
        reader.read_char()
        if self._code() is not CharCode.SINGLEQUOTE:
            raise CompileError(ErrorCode.INVALID_CHAR_CONSTANT, line_no, col_no)
        reader.read_char()
        return Token(TokenType.TK_CHAR, line_no, col_no, value)

    def _relational(self, combined: TokenType, single: TokenType) -> Token:
        reader = self._reader
        reader.read_char()
        if self._code() is CharCode.EQ:
            token = Token(combined, reader.line_no, reader.col_no)
            reader.read_char()
            return token
        return Token(single, reader.line_no, reader.col_no)

    def _pair(self, follow: CharCode, combined: TokenType, single: TokenType) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        if self._code() is follow:
            reader.read_char()
            return Token(combined, line_no, col_no)
        return Token(single, line_no, col_no)

    def get_token(self) -> Token:
        reader = self._reader
        while True:
            if reader.current_char is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            code = self._code()
            line_no, col_no = reader.line_no, reader.col_no

            if code is CharCode.SPACE:
                reader.read_char()
                continue
            if code is CharCode.LETTER:
                return self._read_ident_keyword()
            if code is CharCode.DIGIT:
                return self._read_number()
            if code is CharCode.SINGLEQUOTE:
                return self._read_const_char()
            if code in _SINGLE:
                reader.read_char()
                return Token(_SINGLE[code], line_no, col_no)
            if code is CharCode.LPAR:
                reader.read_char()
                follow = self._code()
                if follow is CharCode.TIMES:
                    self._skip_comment()
                    continue
                if follow is CharCode.PERIOD:
                    reader.read_char()
                    return Token(TokenType.SB_LSEL, line_no, col_no)
                return Token(TokenType.SB_LPAR, line_no, col_no)
            if code is CharCode.COLON:
                return self._pair(CharCode.EQ, TokenType.SB_ASSIGN, TokenType.SB_COLON)
            if code is CharCode.PERIOD:
                return self._pair(CharCode.RPAR, TokenType.SB_RSEL, TokenType.SB_PERIOD)
            if code is CharCode.EXCLAIMATION:
                reader.read_char()
                if self._code() is CharCode.EQ:
                    reader.read_char()
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                raise CompileError(ErrorCode.INVALID_SYMBOL, line_no, col_no)
            if code is CharCode.GT:
                return self._relational(TokenType.SB_GE, TokenType.SB_GT)
            if code is CharCode.LT:
                return self._relational(TokenType.SB_LE, TokenType.SB_LT)
            raise CompileError(ErrorCode.INVALID_SYMBOL, line_no, col_no)


def scan_file(path: str | os.PathLike[str], out: TextIO) -> int:
    """Write one line per token of the file at ``path`` to ``out``.

    Returns the number of tokens written. Raises OSError if the file cannot
    be read and CompileError on a lexical error.
    """
    lexer = _Lexer(CharReader.from_file(path))
    count = 0
    token = lexer.get_token()
    while token.token_type is not TokenType.TK_EOF:
        print(format_token(token), file=out)
        count += 1
        token = lexer.get_token()
    return count


def main(argv: list[str] | None = None) -> int:
    """List the tokens of the file named by the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("scanner: no input file.")
        return -1
    try:
        scan_file(args[0], sys.stdout)
    except OSError:
        print("Can't read input file!")
        return -1
    except CompileError as exc:
        print(exc)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())