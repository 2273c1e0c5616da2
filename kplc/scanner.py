"""Scanner that turns source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from kplc.charcode import CharCode, char_code
from kplc.errors import CompileError, ErrorCode
from kplc.reader import CharReader
from kplc.token import MAX_IDENT_LEN, Token, TokenType, check_keyword

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

# first character -> (class of second character, combined type, single type)
_DOUBLE: dict[CharCode, tuple[CharCode, TokenType, TokenType]] = {
    CharCode.LT: (CharCode.EQ, TokenType.SB_LE, TokenType.SB_LT),
    CharCode.GT: (CharCode.EQ, TokenType.SB_GE, TokenType.SB_GT),
    CharCode.PERIOD: (CharCode.RPAR, TokenType.SB_RSEL, TokenType.SB_PERIOD),
    CharCode.COLON: (CharCode.EQ, TokenType.SB_ASSIGN, TokenType.SB_COLON),
}


class Scanner:
    """Produces tokens from a :class:`CharReader`.

    Lexical errors are raised as :class:`CompileError`.
    """

    def __init__(self, reader: CharReader) -> None:
        self.reader = reader

    def _code(self) -> CharCode | None:
        ch = self.reader.current_char
        return None if ch is None else char_code(ch)

    def _skip_blank(self) -> None:
        while self._code() is CharCode.SPACE:
            self.reader.read_char()

    def _skip_comment(self) -> None:
        state = 0
        while self.reader.current_char is not None and state < 2:
            code = self._code()
            if code is CharCode.TIMES:
                state = 1
            elif code is CharCode.RPAR:
                state = 2 if state == 1 else 0
            else:
                state = 0
            self.reader.read_char()
        if state != 2:
            raise CompileError(
                ErrorCode.END_OF_COMMENT, self.reader.line_no, self.reader.col_no
            )

    def _read_ident_keyword(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        chars = [reader.current_char]
        reader.read_char()
        while self._code() in (CharCode.LETTER, CharCode.DIGIT):
            if len(chars) <= MAX_IDENT_LEN:
                chars.append(reader.current_char)
            reader.read_char()
        if len(chars) > MAX_IDENT_LEN:
            raise CompileError(ErrorCode.IDENT_TOO_LONG, line_no, col_no)
        word = "".join(chars)
        kind = check_keyword(word)
        if kind is TokenType.TK_NONE:
            kind = TokenType.TK_IDENT
        return Token(kind, line_no, col_no, word)

    def _read_number(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        digits = []
        while self._code() is CharCode.DIGIT:
            digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits)
        return Token(TokenType.TK_NUMBER, line_no, col_no, text, int(text))

    def _read_const_char(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        reader.read_char()
        if reader.current_char is None:
            raise CompileError(ErrorCode.INVALID_CHAR_CONSTANT, line_no, col_no)
        value = reader.current_char
        reader.read_char()
        if self._code() is not CharCode.SINGLEQUOTE:
            raise CompileError(ErrorCode.INVALID_CHAR_CONSTANT, line_no, col_no)
        reader.read_char()
        return Token(TokenType.TK_CHAR, line_no, col_no, value)

    def get_token(self) -> Token:
        """Read and return the next token; TK_EOF at the end of input."""
        reader = self.reader
        while True:
            if reader.current_char is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            code = self._code()
            line_no, col_no = reader.line_no, reader.col_no

            if code is CharCode.SPACE:
                self._skip_blank()
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
            if code in _DOUBLE:
                follow, combined, single = _DOUBLE[code]
                reader.read_char()
                if self._code() is follow:
                    reader.read_char()
                    return Token(combined, line_no, col_no)
                return Token(single, line_no, col_no)
            if code is CharCode.EXCLAIMATION:
                reader.read_char()
                if self._code() is CharCode.EQ:
                    reader.read_char()
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                raise CompileError(ErrorCode.INVALID_SYMBOL, line_no, col_no)
            if code is CharCode.LPAR:
                reader.read_char()
                follow = self._code()
                if follow is CharCode.PERIOD:
                    reader.read_char()
                    return Token(TokenType.SB_LSEL, line_no, col_no)
                if follow is CharCode.TIMES:
                    reader.read_char()
                    self._skip_comment()
                    continue
                return Token(TokenType.SB_LPAR, line_no, col_no)
            raise CompileError(ErrorCode.INVALID_SYMBOL, line_no, col_no)

    def get_valid_token(self) -> Token:
        """Return the next token that is not TK_NONE."""
        token = self.get_token()
        while token.token_type is TokenType.TK_NONE:
            token = self.get_token()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the TK_EOF token."""
        while True:
            token = self.get_valid_token()
            if token.token_type is TokenType.TK_EOF:
                return
            yield token


def format_token(token: Token) -> str:
    """Render a token as 'line-col:KIND' the way the scanner listing shows it."""
    prefix = f"{token.line_no}-{token.col_no}:"
    kind = token.token_type
    if kind in (TokenType.TK_IDENT, TokenType.TK_NUMBER):
        return f"{prefix}{kind.name}({token.string})"
    if kind is TokenType.TK_CHAR:
        return f"{prefix}TK_CHAR('{token.string}')"
    return prefix + kind.name


def scan_text(text: str) -> list[Token]:
    """Return all tokens of ``text``, without the final TK_EOF."""
    return list(Scanner(CharReader(text)))