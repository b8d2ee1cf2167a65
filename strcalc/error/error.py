from dataclasses import dataclass, field

from strcalc.error.communicator import Communicator, ErrorRaiser
from strcalc.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    pass


@dataclass
class CompilerError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )


class UnrecoverableError(CompilerError):
    # The exception raised as soon as an instance is created
    stage = CompilerException

    # Add the error to the list, and immediately raise it
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)
        Communicator.communicate(self.stage)
