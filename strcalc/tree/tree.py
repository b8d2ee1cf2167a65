from __future__ import annotations

from dataclasses import dataclass, field

from strcalc.buffer import Buffer
from strcalc.type import Type
from strcalc.util import Span


@dataclass
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from strcalc.tree.printer import Printer

        printer = Printer()
        return printer.print(self)


@dataclass
class LiteralNode(Node):
    buffer: Buffer

    @classmethod
    def from_text(cls, text: str, span: Span = None) -> LiteralNode:
        return cls(Buffer.from_bytes(text.encode("ascii")), span=span)


@dataclass
class BinopNode(Node):
    left: Node
    right: Node

    # The operator token type that produces this node
    operator = None

    @property
    def operator_char(self) -> str:
        return self.operator.value


@dataclass
class ConcatNode(BinopNode):
    operator = Type.DOT


@dataclass
class RepeatNode(BinopNode):
    operator = Type.CARET
