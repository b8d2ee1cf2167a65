from enum import Enum


class Type(Enum):
    LRB = "("
    RRB = ")"
    DOT = "."
    CARET = "^"
    DIGIT = "digit"
    EOF = "eof"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.DIGIT:
                return "literal"
            case Type.EOF:
                return "end of input"
        return repr(self.value)

    def article_str(self) -> str:
        if self == Type.EOF:
            return str(self)
        return f"a {self}"
