from typing import Iterable

from strcalc.scanner.scanner import Scanner, TokenStream
from strcalc.type import Type

from strcalc.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    ParseError,
    UnclosedBracketError,
)
from strcalc.tree.tree import (  # isort:skip
    ConcatNode,
    LiteralNode,
    Node,
    RepeatNode,
)


class Parser:
    """Recursive descent parser for the string calculator.

    Grammar, from lowest to highest binding:

        Expr      := Concat
        Concat    := Repeat ( '.' Repeat )*
        Repeat    := Primary ( '^' RepeatRHS )?
        RepeatRHS := Repeat | Primary
        Primary   := Literal | '(' Expr ')'

    `.` is left-associative. `^` is right-associative for chains such as
    `2^3^4`, but whether its right operand is a `Repeat` or a `Primary` is
    decided by looking only at the token directly after the first token of
    that operand. Hence `2^(3)^4` is not parsed as `2^((3)^4)`: the right
    operand stops at `(3)` and `^4` is left over.

    Parsing stops after the first complete expression, any tokens after it
    are ignored.
    """

    def __init__(self, program: str | Iterable[str]) -> None:
        self.scanner = Scanner(program)
        self.tokens = None

    @property
    def program(self) -> str:
        return self.scanner.program

    def parse(self) -> Node:
        """Scan and parse the program passed to `Parser(program)`.

        Raises a `ParserException` on the first syntax error. Tokens after the
        first complete expression are ignored.

        Returns:
            Node: The root of the AST.
        """
        self.tokens = TokenStream(self.scanner)
        try:
            return self.parse_expr()
        except RecursionError:
            pass
        # Raised outside of the handler, once the stack has been unwound
        NestingTooDeepError(self.program, self.tokens.current.span)

    def parse_expr(self) -> Node:
        return self.parse_concat()

    def parse_concat(self) -> Node:
        left = self.parse_repeat()
        while self.tokens.current.match(Type.DOT):
            self.tokens.advance()
            right = self.parse_repeat()
            left = ConcatNode(left, right, span=left.span & right.span)
        return left

    def parse_repeat(self) -> Node:
        left = self.parse_primary()
        if not self.tokens.current.match(Type.CARET):
            return left

        self.tokens.advance()
        if self.tokens.peek_next.match(Type.CARET):
            right = self.parse_repeat()
        else:
            right = self.parse_primary()
        return RepeatNode(left, right, span=left.span & right.span)

    def parse_primary(self) -> Node:
        current = self.tokens.current
        match current.type:
            case Type.DIGIT:
                self.tokens.advance()
                return LiteralNode.from_text(current.text, span=current.span)

            case Type.LRB:
                self.tokens.advance()
                node = self.parse_expr()
                closing = self.tokens.current
                if not closing.match(Type.RRB):
                    UnclosedBracketError(self.program, current.span, current.type)
                self.tokens.advance()
                # Include the brackets in the span for clearer error messages
                node.span = current.span & closing.span
                return node

        ParseError(
            self.program, current.span, "Primary", [Type.DIGIT, Type.LRB], current
        )
