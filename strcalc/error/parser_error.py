from dataclasses import dataclass
from typing import List

from strcalc.error.error import CompilerException, UnrecoverableError
from strcalc.token import Token
from strcalc.type import Type


class ParserException(CompilerException):
    pass


class ParserError(UnrecoverableError):
    stage = ParserException


@dataclass
class BracketMismatchError(ParserError):
    bracket: Type

    def create_error(self, before, after=""):
        return super().create_error(before, after, class_name="BracketError")


class UnclosedBracketError(BracketMismatchError):
    def __str__(self) -> str:
        return self.create_error(
            f"The {str(self.bracket)} bracket on {self.span.lines_str} was never closed."
        )


class NestingTooDeepError(ParserError):
    def __str__(self) -> str:
        return self.create_error(
            f"Brackets or repetitions nested too deeply on {self.span.lines_str}.",
            class_name="SyntaxError",
        )


@dataclass
class ParseError(ParserError):
    nt: str
    expected: List[Type]
    got: Token

    def __str__(self) -> str:
        expected = " or ".join(_type.article_str() for _type in self.expected)
        after = f"Expected {expected}, but got {self.got.type.article_str()}"
        if self.got.match(Type.DIGIT):
            after += f" {self.got.text!r}"
        after += f" instead on {self.span.lines_str} column {self.span.start_col + 1}."

        return self.create_error(
            f"Expected {self.str_nt} on {self.span.lines_str}.",
            after,
            class_name="SyntaxError",
        )

    @property
    def str_nt(self) -> str:
        match self.nt:
            case "Primary":
                return "a toplevel expression"
            case _:
                raise Exception(
                    f"Attempted to print out {self.nt!r} as extended string, but no such format exists."
                )
