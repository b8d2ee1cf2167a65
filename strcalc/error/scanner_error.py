from dataclasses import dataclass

from strcalc.error.error import CompilerError, CompilerException


class ScannerException(CompilerException):
    pass


class ScannerError(CompilerError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


@dataclass
class UnreadableInputError(ScannerError):
    reason: str

    def __str__(self) -> str:
        return self.create_error(
            f"Unable to read the program on {self.span.lines_str}: {self.reason}."
        )
