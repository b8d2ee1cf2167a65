import io
import re
from typing import Iterable, Iterator

from strcalc.error.communicator import Communicator
from strcalc.error.scanner_error import ScannerException, UnreadableInputError
from strcalc.error.warning import UnrecognizedCharacterWarning
from strcalc.token import Token
from strcalc.type import Type
from strcalc.util import Span


class Scanner:
    def __init__(self, program: str | Iterable[str]) -> None:
        # Either a complete program, or a text stream such as `sys.stdin`
        if isinstance(program, str):
            program = io.StringIO(program)
        self.stream = program
        self.lines = []

        self.pattern = re.compile(
            r"""
                (?P<LRB>\()| # lb = Left Round Bracket
                (?P<RRB>\))| # rb = Right Round Bracket
                (?P<DOT>\.)| # Concatenation
                (?P<CARET>\^)| # Repetition
                (?P<DIGIT>[0-9]+)|
                (?P<SPACE>[\ \t\x08\v\r\n])|
                (?P<ERROR>.)
            """,
            flags=re.X | re.S,
        )

    @property
    def program(self) -> str:
        """The part of the program that has been read so far."""
        return "".join(self.lines)

    def scan(self) -> Iterator[Token]:
        """Lazily extract the tokens from the program passed to `Scanner(program)`.

        The program is read one line at a time, so tokens are available before
        the end of the input has been reached. Unrecognized characters are
        reported as warnings and skipped. The final token is always of type
        `Type.EOF`.

        Yields:
            Token: Token instances, in the order in which they occur.
        """
        line_no = 0
        line = ""
        for line_no, line in enumerate(self.read_lines(), start=1):
            self.lines.append(line)
            yield from self.scan_line(line, line_no)

        # Point the end of input just past the final character of the program
        if line.endswith("\n"):
            line_no += 1
            line = ""
        end = len(line)
        yield Token("", Type.EOF, Span(max(line_no, 1), (end, end)))

    def read_lines(self) -> Iterator[str]:
        try:
            yield from self.stream
        except (OSError, UnicodeDecodeError) as e:
            line_no = len(self.lines) + 1
            UnreadableInputError(self.program, Span(line_no, (0, 0)), str(e))
            Communicator.communicate(ScannerException)

    def scan_line(self, line: str, line_no: int) -> Iterator[Token]:
        for match in self.pattern.finditer(line):
            span = Span(line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    UnrecognizedCharacterWarning(self.program, match[0])
                    # Warnings are shown as soon as they occur
                    Communicator.flush_warnings()
                    continue

            yield Token(match[0], match.lastgroup, span)


class TokenStream:
    """A two-token window over the tokens of a `Scanner`.

    `current` is the token under consideration, `peek_next` is the token
    directly after it. Once the end of the input is reached, both keep
    returning the `Type.EOF` token.
    """

    def __init__(self, scanner: Scanner) -> None:
        self.scanner = scanner
        self.tokens = scanner.scan()
        self.last = None
        self.current = self.pull()
        self.peek_next = self.pull()

    def pull(self) -> Token:
        # `scan` ends with the EOF token, which is repeated from then on
        token = next(self.tokens, None)
        if token is None:
            return self.last
        self.last = token
        return token

    def advance(self) -> Token:
        """Move the window one token forward, and return the new current token."""
        self.current = self.peek_next
        self.peek_next = self.pull()
        return self.current
