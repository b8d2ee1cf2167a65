from dataclasses import dataclass

from strcalc.error.communicator import Communicator, WarningRaiser
from strcalc.util import Colors, Span


@dataclass
class Warning:
    program: str

    def __post_init__(self) -> None:
        WarningRaiser.WARNINGS.append(self)

    def create_message(
        self, span: Span | None, before: str, after: str = "", n_after=0
    ) -> str:
        return Communicator.create_message(
            self.program, span, "Warning", before, after, 0, n_after, Colors.YELLOW
        )


@dataclass
class UnrecognizedCharacterWarning(Warning):
    character: str

    def __str__(self) -> str:
        # One line per character, without the surrounding source
        before = f"Ignoring unrecognized character '{self.character}' in input"
        return self.create_message(None, before)
