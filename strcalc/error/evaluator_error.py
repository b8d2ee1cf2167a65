from dataclasses import dataclass

from strcalc.error.error import CompilerException, UnrecoverableError


class EvaluatorException(CompilerException):
    pass


# Raised by `Buffer` when its value is read or released after it was released
class BufferReleasedError(EvaluatorException):
    pass


@dataclass
class ResultTooLargeError(UnrecoverableError):
    stage = EvaluatorException

    length: int
    limit: int

    def __str__(self) -> str:
        return self.create_error(
            f"The repetition on {self.span.lines_str} would produce {self.length} bytes, more than the limit of {self.limit}.",
            class_name="EvaluatorError",
        )
