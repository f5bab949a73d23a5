"""
Dispatch over the closed set of expression variants.

Evaluators and renderers subclass ExpressionVisitor and implement one
``visit_<kind>`` method per variant. Dispatch is keyed on ``NodeKind``,
so a node type outside the closed set is rejected rather than silently
falling through.

Example:
    >>> class CountLeaves(ExpressionVisitor):
    ...     def visit_base(self, node):
    ...         return 1
    ...     def generic_visit(self, node):
    ...         return sum(self.visit(child) for child in node.children)
    >>> CountLeaves().visit(join(d1, 10, d2))
    2
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pysurvalgebra.core.exceptions import InvalidArgumentError
from pysurvalgebra.expressions.nodes import ALL_NODE_TYPES, NodeKind, SurvivalExpr


_METHOD_NAMES: dict[NodeKind, str] = {kind: f"visit_{kind.value}" for kind in NodeKind}


class ExpressionVisitor:
    """
    Recursive visitor over a survival expression tree.

    Subclasses override the ``visit_*`` methods they need. Any variant
    without an override goes to ``generic_visit``, which raises so that a
    missing case is reported instead of producing a wrong value.
    """

    def visit(self, node: SurvivalExpr) -> Any:
        if not isinstance(node, ALL_NODE_TYPES):
            raise InvalidArgumentError(
                f"Cannot visit {type(node).__name__}: not a survival expression node",
                name="node",
                value=node,
            )
        method = getattr(self, _METHOD_NAMES[node.kind], self.generic_visit)
        return method(node)

    def generic_visit(self, node: SurvivalExpr) -> Any:
        raise NotImplementedError(
            f"{type(self).__name__} does not handle {type(node).__name__} nodes"
        )


def walk(node: SurvivalExpr) -> Iterator[SurvivalExpr]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def depth(node: SurvivalExpr) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if not node.children:
        return 1
    return 1 + max(depth(child) for child in node.children)
