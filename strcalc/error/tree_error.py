from dataclasses import dataclass

from strcalc.error.error import CompilerException, UnrecoverableError


class TreeException(CompilerException):
    pass


# Only reachable if a node type is added without teaching the tree passes about it
@dataclass
class UnknownNodeError(UnrecoverableError):
    stage = TreeException

    node: object
    action: str

    def __str__(self) -> str:
        return self.create_error(
            f"Attempt to {self.action} unknown node {self.node.__class__.__name__!r}.",
            class_name="TreeError",
        )


@dataclass
class TreeTooDeepError(UnrecoverableError):
    stage = TreeException

    action: str

    def __str__(self) -> str:
        return self.create_error(
            f"The expression on {self.span.lines_str} is nested too deeply to {self.action}.",
            class_name="TreeError",
        )
