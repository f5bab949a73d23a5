"""
Composite survival expressions.

Public API:
    join(d1, t1, d2, ...) / join_sequence(dists, cutpoints) -> Projection
    mix(d1, w1, d2, w2, ...) / mix_sequence(dists, weights) -> Pooled
    add_hazards(d1, ...) / add_hazards_sequence(dists) -> AdditiveHazards
    apply_hr(d, hr) / apply_af(d, af) / apply_or(d, or_) / apply_shift(d, shift)
    set_covariates(d, data=None, **values) -> CovariateModel

Example:
    >>> from pysurvalgebra.expressions import join, apply_hr
    >>> model = apply_hr(join(fit_trial, 24, fit_registry), 0.7)
"""

from pysurvalgebra.expressions.nodes import (
    NodeKind,
    SurvivalExpr,
    Base,
    Projection,
    Pooled,
    ProportionalHazards,
    AcceleratedFailureTime,
    ProportionalOdds,
    Shift,
    AdditiveHazards,
    CovariateModel,
)
from pysurvalgebra.expressions.operators import (
    as_expression,
    join,
    join_sequence,
    mix,
    mix_sequence,
    add_hazards,
    add_hazards_sequence,
    apply_hr,
    apply_af,
    apply_or,
    apply_shift,
    set_covariates,
    set_covariates_frame,
    project,
    project_sequence,
    pool,
    pool_sequence,
)
from pysurvalgebra.expressions.covariates import bind_covariates
from pysurvalgebra.expressions.visitor import ExpressionVisitor, walk, depth
from pysurvalgebra.expressions.presentation import join_points, shifted_summary

__all__ = [
    # Nodes
    "NodeKind",
    "SurvivalExpr",
    "Base",
    "Projection",
    "Pooled",
    "ProportionalHazards",
    "AcceleratedFailureTime",
    "ProportionalOdds",
    "Shift",
    "AdditiveHazards",
    "CovariateModel",
    # Operators
    "as_expression",
    "join",
    "join_sequence",
    "mix",
    "mix_sequence",
    "add_hazards",
    "add_hazards_sequence",
    "apply_hr",
    "apply_af",
    "apply_or",
    "apply_shift",
    "set_covariates",
    "set_covariates_frame",
    "bind_covariates",
    # Deprecated
    "project",
    "project_sequence",
    "pool",
    "pool_sequence",
    # Traversal
    "ExpressionVisitor",
    "walk",
    "depth",
    # Presentation
    "join_points",
    "shifted_summary",
]
