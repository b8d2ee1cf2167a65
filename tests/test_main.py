import io

from strcalc.main import main
from tests.test_util import expected_output, open_file


def run(program: str) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    status = main(io.StringIO(program), stdout, stderr)
    return status, stdout.getvalue(), stderr.getvalue()


def test_repeat():
    status, out, err = run("5^3")
    assert status == 0
    assert out == "\n".join(
        [
            "Binop: ^",
            "|   Left:",
            "|   |   String literal:5",
            "|   Right:",
            "|   |   String literal:3",
            "555",
            "",
        ]
    )
    assert err == ""


def test_literal():
    status, out, err = run("12\n")
    assert (status, out, err) == (0, "String literal:12\n12\n", "")


def test_empty_result():
    status, out, _ = run("9^0")
    assert status == 0
    assert out.endswith("String literal:0\n\n")


def test_valid_files(valid_file: str):
    status, out, err = run(open_file(valid_file))
    assert status == 0
    assert out.endswith(expected_output(valid_file))
    assert err == ""


def test_warning():
    status, out, err = run("1#.2")
    assert status == 0
    assert out.endswith("\n12\n")
    assert "Warning: Ignoring unrecognized character '#' in input" in err


def test_empty_input():
    status, out, err = run("")
    assert status == 1
    assert out == ""
    assert "Expected a toplevel expression" in err


def test_unmatched_bracket():
    status, out, err = run("(12.34")
    assert status == 1
    # Nothing is printed before the whole program has been parsed
    assert out == ""
    assert "was never closed" in err


def test_parser_error_files(parser_error: str):
    status, out, err = run(open_file(parser_error))
    assert status == 1
    assert out == ""
    assert err


def test_warning_before_error():
    status, _, err = run("#1.")
    assert status == 1
    assert err.index("Ignoring unrecognized character '#'") < err.index("SyntaxError")


def test_trailing_input_ignored():
    status, out, err = run("2^(3)^4")
    assert status == 0
    assert out.endswith("\n222\n")
    assert err == ""


def test_repeat_empty_many_times():
    status, out, err = run("(1^0)^10000000000000000000")
    assert status == 0
    assert out.endswith("\n\n")
    assert err == ""


def test_repeat_result_too_large():
    status, _, err = run("1^10000000000000000000")
    assert status == 1
    assert "EvaluatorError" in err
    assert "Traceback" not in err


def test_nesting_too_deep():
    status, out, err = run("(" * 20000 + "1" + ")" * 20000)
    assert status == 1
    assert out == ""
    assert "nested too deeply" in err


def test_long_concat_chain():
    status, out, err = run("1" + ".1" * 2000)
    assert status == 0
    assert out.endswith("\n" + "1" * 2001 + "\n")
    assert err == ""


def test_undecodable_input(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"12\xff.34"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    stdout = io.StringIO()
    stderr = io.StringIO()

    status = main(stdout=stdout, stderr=stderr)
    assert status == 0
    assert stdout.getvalue().endswith("\n1234\n")
    assert stderr.getvalue() == (
        "Warning: Ignoring unrecognized character '\ufffd' in input\n"
    )
