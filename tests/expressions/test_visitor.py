"""
Tests for ExpressionVisitor dispatch and tree traversal helpers.
"""

import pytest

from pysurvalgebra.core.exceptions import InvalidArgumentError
from pysurvalgebra.expressions import (
    ExpressionVisitor,
    NodeKind,
    add_hazards,
    apply_af,
    apply_hr,
    apply_or,
    apply_shift,
    depth,
    join,
    mix,
    set_covariates,
    walk,
)


class KindRecorder(ExpressionVisitor):
    """Returns a nested description built from every variant."""

    def visit_base(self, node):
        return node.label

    def visit_projection(self, node):
        return ("join", self.visit(node.early), node.at, self.visit(node.late))

    def visit_pooled(self, node):
        return ("mix", tuple(self.visit(m) for m in node.members), node.weights)

    def visit_proportional_hazards(self, node):
        return ("hr", node.hr, self.visit(node.base))

    def visit_accelerated_failure_time(self, node):
        return ("af", node.af, self.visit(node.base))

    def visit_proportional_odds(self, node):
        return ("or", node.or_, self.visit(node.base))

    def visit_shift(self, node):
        return ("shift", node.shift, self.visit(node.base))

    def visit_additive_hazards(self, node):
        return ("add", tuple(self.visit(m) for m in node.members))

    def visit_covariate_model(self, node):
        return ("cov", node.n_rows, self.visit(node.base))


class TestVisitor:

    def test_every_variant_dispatched(self, d1, d2, d3):
        expr = add_hazards(
            join(apply_hr(d1, 2), 10, apply_af(d2, 3)),
            mix(apply_or(d3, 0.5), 1, apply_shift(d1, 4), 2),
            set_covariates(d2, group="Good"),
        )
        assert KindRecorder().visit(expr) == (
            "add",
            (
                ("join", ("hr", 2.0, "d1"), 10.0, ("af", 3.0, "d2")),
                ("mix", (("or", 0.5, "d3"), ("shift", 4.0, "d1")), (1.0, 2.0)),
                ("cov", 1, "d2"),
            ),
        )

    def test_missing_case_raises(self, d1):
        class LeavesOnly(ExpressionVisitor):
            def visit_base(self, node):
                return node

        with pytest.raises(NotImplementedError, match="does not handle ProportionalHazards"):
            LeavesOnly().visit(apply_hr(d1, 2))

    def test_generic_visit_override(self, d1, d2):
        class CountLeaves(ExpressionVisitor):
            def visit_base(self, node):
                return 1

            def generic_visit(self, node):
                return sum(self.visit(child) for child in node.children)

        assert CountLeaves().visit(join(d1, 5, apply_hr(d2, 2), 9, d1)) == 3

    def test_non_node_rejected(self):
        with pytest.raises(InvalidArgumentError, match="not a survival expression node"):
            KindRecorder().visit("exp")


class TestWalk:

    def test_preorder(self, d1, d2, d3):
        expr = join(d1, 10, d2, 20, d3)
        kinds = [node.kind for node in walk(expr)]
        assert kinds == [
            NodeKind.PROJECTION,
            NodeKind.PROJECTION,
            NodeKind.BASE,
            NodeKind.BASE,
            NodeKind.BASE,
        ]
        leaves = [node for node in walk(expr) if node.kind is NodeKind.BASE]
        assert leaves == [d1, d2, d3]

    def test_leaf(self, d1):
        assert list(walk(d1)) == [d1]


class TestDepth:

    def test_leaf(self, d1):
        assert depth(d1) == 1

    def test_left_nested_join(self, d1, d2, d3):
        assert depth(join(d1, 10, d2, 20, d3)) == 3

    def test_collapse_keeps_depth(self, d1):
        assert depth(apply_hr(apply_hr(apply_hr(d1, 2), 3), 4)) == 2
