import pytest

from kplc.errors import CompileError, ErrorCode
from kplc.reader import CharReader
from kplc.scanner import Scanner, format_token, scan_text
from kplc.token import Token, TokenType, token_to_string


def types(text):
    return [tok.token_type for tok in scan_text(text)]


def test_program_header_tokens():
    assert types("PROGRAM example; BEGIN END.") == [
        TokenType.KW_PROGRAM,
        TokenType.TK_IDENT,
        TokenType.SB_SEMICOLON,
        TokenType.KW_BEGIN,
        TokenType.KW_END,
        TokenType.SB_PERIOD,
    ]


def test_keywords_are_case_insensitive():
    assert types("program Begin eNd") == [
        TokenType.KW_PROGRAM,
        TokenType.KW_BEGIN,
        TokenType.KW_END,
    ]


def test_compound_symbols():
    assert types(":= != <= >= (. .) < > : . ( )") == [
        TokenType.SB_ASSIGN,
        TokenType.SB_NEQ,
        TokenType.SB_LE,
        TokenType.SB_GE,
        TokenType.SB_LSEL,
        TokenType.SB_RSEL,
        TokenType.SB_LT,
        TokenType.SB_GT,
        TokenType.SB_COLON,
        TokenType.SB_PERIOD,
        TokenType.SB_LPAR,
        TokenType.SB_RPAR,
    ]


def test_single_symbols():
    assert types("+-*/=,;") == [
        TokenType.SB_PLUS,
        TokenType.SB_MINUS,
        TokenType.SB_TIMES,
        TokenType.SB_SLASH,
        TokenType.SB_EQ,
        TokenType.SB_COMMA,
        TokenType.SB_SEMICOLON,
    ]


def test_positions_point_at_token_text():
    text = "PROGRAM demo;\n  VAR  alpha : INTEGER;\nBEGIN\n   alpha := 42 <= 7\nEND."
    lines = text.split("\n")
    tokens = scan_text(text)
    assert tokens
    for tok in tokens:
        if tok.string:
            expected = tok.string
        else:
            expected = token_to_string(tok.token_type).strip("'")
        assert lines[tok.line_no - 1][tok.col_no - 1 :].startswith(expected)


def test_comment_is_skipped():
    assert [tok.string for tok in scan_text("a (* some comment *) b")] == ["a", "b"]


def test_unterminated_comment():
    with pytest.raises(CompileError) as exc:
        scan_text("a (* never closed")
    assert exc.value.code is ErrorCode.END_OF_COMMENT


def test_comment_needs_star_after_opening():
    with pytest.raises(CompileError) as exc:
        scan_text("(*)")
    assert exc.value.code is ErrorCode.END_OF_COMMENT


def test_identifier_at_limit_is_accepted():
    name = "a" * 15
    assert [tok.string for tok in scan_text(name)] == [name]


def test_identifier_too_long():
    with pytest.raises(CompileError) as exc:
        scan_text("x " + "b" * 16)
    assert exc.value.code is ErrorCode.IDENT_TOO_LONG
    assert exc.value.col_no == 3


def test_number_value():
    (tok,) = scan_text("12345")
    assert tok.token_type is TokenType.TK_NUMBER
    assert tok.string == "12345"
    assert tok.value == 12345


def test_char_constant():
    (tok,) = scan_text("'x'")
    assert tok.token_type is TokenType.TK_CHAR
    assert tok.string == "x"


@pytest.mark.parametrize("text", ["'xy", "'x", "'"])
def test_invalid_char_constant(text):
    with pytest.raises(CompileError) as exc:
        scan_text(text)
    assert exc.value.code is ErrorCode.INVALID_CHAR_CONSTANT


@pytest.mark.parametrize("text", ["!", "a !b", "  #"])
def test_invalid_symbol(text):
    with pytest.raises(CompileError) as exc:
        scan_text(text)
    err = exc.value
    assert err.code is ErrorCode.INVALID_SYMBOL
    assert str(err) == f"{err.line_no}-{err.col_no}:Invalid symbol!"


def test_eof_token_and_empty_iteration():
    scanner = Scanner(CharReader(""))
    assert scanner.get_token().token_type is TokenType.TK_EOF
    assert list(Scanner(CharReader("   \n  "))) == []


def test_get_valid_token_sequence():
    scanner = Scanner(CharReader("a b"))
    assert scanner.get_valid_token().string == "a"
    assert scanner.get_valid_token().string == "b"
    assert scanner.get_valid_token().token_type is TokenType.TK_EOF


def test_lpar_at_end_of_input():
    assert types("(") == [TokenType.SB_LPAR]


def test_format_token():
    assert format_token(Token(TokenType.TK_IDENT, 1, 1, "abc")) == "1-1:TK_IDENT(abc)"
    assert format_token(Token(TokenType.TK_CHAR, 2, 3, "x")) == "2-3:TK_CHAR('x')"
    assert format_token(Token(TokenType.KW_PROGRAM, 4, 5)) == "4-5:KW_PROGRAM"
    assert format_token(Token(TokenType.SB_ASSIGN, 4, 5)) == "4-5:SB_ASSIGN"