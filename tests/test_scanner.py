import io

import pytest

from strcalc import Scanner, Token, TokenStream, Type
from strcalc.error.scanner_error import ScannerException
from tests.test_util import open_file


def scan(program) -> list:
    return list(Scanner(program).scan())


def test_scan():
    expected = [
        Token("12", Type.DIGIT),
        Token(".", Type.DOT),
        Token("34", Type.DIGIT),
        Token("^", Type.CARET),
        Token("(", Type.LRB),
        Token("5", Type.DIGIT),
        Token(")", Type.RRB),
        Token("", Type.EOF),
    ]
    assert scan("12 . 34^(5)") == expected


def test_empty():
    assert scan("") == [Token("", Type.EOF)]


def test_whitespace_only():
    assert scan(" \t\x08\v\r\n\n") == [Token("", Type.EOF)]


def test_maximal_digit_run():
    tokens = scan("0123456789.9")
    assert [token.text for token in tokens] == ["0123456789", ".", "9", ""]


def test_digits_split_by_whitespace():
    tokens = scan("12 34\n56")
    assert [token.type for token in tokens] == [Type.DIGIT] * 3 + [Type.EOF]


def test_spans():
    tokens = scan("12 .\n  34")
    assert [(token.span.start_ln, token.span.col) for token in tokens] == [
        (1, (0, 2)),
        (1, (3, 4)),
        (2, (2, 4)),
        (2, (4, 4)),
    ]


def test_eof_span_after_newline():
    tokens = scan("1\n")
    assert tokens[-1].span.start_ln == 2
    assert tokens[-1].span.col == (0, 0)


def test_valid_files(valid_file: str):
    tokens = scan(open_file(valid_file))
    assert tokens[-1].type == Type.EOF
    assert all(token.type != Type.EOF for token in tokens[:-1])


def test_stream():
    tokens = scan(io.StringIO("1.\n2"))
    assert [token.text for token in tokens] == ["1", ".", "2", ""]


def test_lazy():
    # Tokens are produced before the rest of the stream is read
    def lines():
        yield "1.2\n"
        raise AssertionError("Read past the first token")

    tokens = Scanner(lines()).scan()
    assert next(tokens) == Token("1", Type.DIGIT)


def test_program_read_so_far():
    scanner = Scanner("1\n.\n2\n")
    tokens = scanner.scan()
    next(tokens)
    assert scanner.program == "1\n"
    list(tokens)
    assert scanner.program == "1\n.\n2\n"


@pytest.mark.parametrize("character", ["#", "a", "+", "\f", "é"])
def test_unrecognized_character(character: str, capsys):
    tokens = scan(f"1{character}.2")
    assert [token.text for token in tokens] == ["1", ".", "2", ""]

    captured = capsys.readouterr()
    assert f"Ignoring unrecognized character '{character}' in input" in captured.err
    assert captured.out == ""


def test_unrecognized_characters_each_warned(capsys):
    scan("#1#")
    captured = capsys.readouterr()
    assert captured.err.count("Ignoring unrecognized character '#' in input") == 2


def test_token_stream():
    tokens = TokenStream(Scanner("1.2"))
    assert tokens.current == Token("1", Type.DIGIT)
    assert tokens.peek_next == Token(".", Type.DOT)

    assert tokens.advance() == Token(".", Type.DOT)
    assert tokens.peek_next == Token("2", Type.DIGIT)

    tokens.advance()
    assert tokens.current == Token("2", Type.DIGIT)
    assert tokens.peek_next.type == Type.EOF


def test_token_stream_repeats_eof():
    tokens = TokenStream(Scanner(""))
    assert tokens.current.type == Type.EOF
    assert tokens.peek_next.type == Type.EOF
    tokens.advance()
    tokens.advance()
    assert tokens.current.type == tokens.peek_next.type == Type.EOF


def test_unreadable_input():
    def lines():
        yield "1.\n"
        raise OSError("device went away")

    with pytest.raises(ScannerException) as excinfo:
        list(Scanner(lines()).scan())
    assert "ScannerError" in str(excinfo.value)
    assert "Unable to read the program on line [2]: device went away." in str(
        excinfo.value
    )


def test_warning_is_one_line(capsys):
    scan("1 # 2")
    assert capsys.readouterr().err == (
        "Warning: Ignoring unrecognized character '#' in input\n"
    )
