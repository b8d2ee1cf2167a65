from strcalc.buffer import Buffer
from strcalc.error.evaluator_error import ResultTooLargeError
from strcalc.error.tree_error import TreeTooDeepError
from strcalc.tree.visitor import NodeVisitor
from strcalc.util import MAX_RESULT_LENGTH, Span

from strcalc.tree.tree import (  # isort:skip
    ConcatNode,
    LiteralNode,
    Node,
    RepeatNode,
)


class Evaluator(NodeVisitor):
    action = "evaluate"

    def __init__(self, program: str = "") -> None:
        # Only used to give context in error messages
        self.program = program

    def evaluate(self, tree: Node) -> Buffer:
        """Evaluate `tree` bottom-up into a single string value.

        The tree itself is left untouched, so it can be evaluated again.

        Returns:
            Buffer: The resulting string, owned by the caller.
        """
        try:
            return self.visit(tree)
        except RecursionError:
            pass
        # Raised outside of the handler, once the stack has been unwound
        TreeTooDeepError(self.program, tree.span or Span.default(), self.action)

    def visit_LiteralNode(self, node: LiteralNode, **kwargs) -> Buffer:
        return node.buffer.duplicate()

    def visit_ConcatNode(self, node: ConcatNode, **kwargs) -> Buffer:
        # Chains such as `1.2.3` nest to the left, so walk down the left side
        # with a stack rather than with recursion
        stack = []
        while isinstance(node, ConcatNode):
            stack.append(node)
            node = node.left

        result = self.visit(node)
        while stack:
            left = result
            with left:
                with self.visit(stack.pop().right) as right:
                    result = Buffer.concat(left, right)
        return result

    def visit_RepeatNode(self, node: RepeatNode, **kwargs) -> Buffer:
        with self.visit(node.left) as left:
            with self.visit(node.right) as right:
                count = right.as_unsigned_integer()
            length = len(left) * count
            if length <= MAX_RESULT_LENGTH:
                try:
                    return left.repeat(count)
                except MemoryError:
                    pass
        ResultTooLargeError(
            self.program, node.span or Span.default(), length, MAX_RESULT_LENGTH
        )
