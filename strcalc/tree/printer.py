from typing import Iterator

from strcalc.error.tree_error import TreeTooDeepError
from strcalc.tree.visitor import YieldVisitor
from strcalc.util import INDENT, Span

from strcalc.tree.tree import (  # isort:skip
    BinopNode,
    ConcatNode,
    LiteralNode,
    Node,
    RepeatNode,
)


class Printer(YieldVisitor):
    """Renders a tree as an indented trace, one node or label per line.

    >>> print(Printer().print(ConcatNode(LiteralNode.from_text("12"), LiteralNode.from_text("34"))))
    Binop: .
    |   Left:
    |   |   String literal:12
    |   Right:
    |   |   String literal:34
    """

    action = "print"

    def print(self, tree: Node) -> str:
        try:
            return "\n".join(
                INDENT * depth + text for depth, text in self.visit(tree, depth=0)
            )
        except RecursionError:
            pass
        # Raised outside of the handler, once the stack has been unwound
        TreeTooDeepError(self.program, tree.span or Span.default(), self.action)

    def visit_LiteralNode(
        self, node: LiteralNode, depth: int = 0, **kwargs
    ) -> Iterator[tuple[int, str]]:
        yield depth, f"String literal:{node.buffer}"

    def visit_BinopNode(
        self, node: BinopNode, depth: int = 0, **kwargs
    ) -> Iterator[tuple[int, str]]:
        yield depth, f"Binop: {node.operator_char}"
        yield depth + 1, "Left:"
        yield from self.visit(node.left, depth=depth + 2)
        yield depth + 1, "Right:"
        yield from self.visit(node.right, depth=depth + 2)

    def visit_ConcatNode(
        self, node: ConcatNode, depth: int = 0, **kwargs
    ) -> Iterator[tuple[int, str]]:
        # Chains such as `1.2.3` nest to the left, so walk down the left side
        # with a stack rather than with recursion
        stack = []
        while isinstance(node, ConcatNode):
            yield depth, f"Binop: {node.operator_char}"
            yield depth + 1, "Left:"
            stack.append((node, depth))
            node, depth = node.left, depth + 2

        yield from self.visit(node, depth=depth)
        while stack:
            node, depth = stack.pop()
            yield depth + 1, "Right:"
            yield from self.visit(node.right, depth=depth + 2)

    def visit_RepeatNode(self, node: RepeatNode, **kwargs) -> Iterator[tuple[int, str]]:
        yield from self.visit_BinopNode(node, **kwargs)
