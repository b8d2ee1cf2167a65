from strcalc.error.tree_error import UnknownNodeError
from strcalc.tree.tree import Node
from strcalc.util import Span


class NodeVisitor:
    """
    For visiting nodes in our AST
    """

    # Used to describe the pass in errors, e.g. "Attempt to evaluate unknown node"
    action = "visit"
    program = ""

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        return visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        span = getattr(node, "span", None) or Span.default()
        UnknownNodeError(self.program, span, node, self.action)


class YieldVisitor(NodeVisitor):
    """
    For yielding values from nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        super().visit_children(node, *args, **kwargs)
        yield from ()
