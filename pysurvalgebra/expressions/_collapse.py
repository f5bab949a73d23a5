"""
Operator table and collapse rule for scalar-parameterised wrappers.

Hazard ratios, acceleration factors, odds ratios and time shifts all
follow one pattern:

    1. validate the incoming scalar
    2. identity value -> return the input unchanged
    3. input already wraps with the same operator -> combine the scalars
       into a NEW node, or drop the wrapper when the result is the identity
    4. otherwise wrap the input in a new node

Nodes are never mutated; step 3 uses ``dataclasses.replace`` so other
references to the original wrapper stay valid.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, replace

from numpy.typing import ArrayLike

from pysurvalgebra.core.validation import (
    check_positive_scalar,
    check_ratio,
    check_finite_scalar,
)
from pysurvalgebra.expressions.nodes import (
    AcceleratedFailureTime,
    ProportionalHazards,
    ProportionalOdds,
    Shift,
    SurvivalExpr,
)


@dataclass(frozen=True)
class OperatorSpec:
    """
    How one scalar wrapper validates, combines and collapses.

    Attributes:
        name: Parameter name used in error messages
        node_type: Node class produced by the operator
        field: Name of the scalar field on ``node_type``
        identity: Value for which the operator is a no-op
        combine: Merges a stored scalar with a new one
        multiplicative: Ratio semantics (> 0, optional log scale) if True,
            any finite value otherwise
    """
    name: str
    node_type: type[SurvivalExpr]
    field: str
    identity: float
    combine: Callable[[float, float], float]
    multiplicative: bool


HAZARD_RATIO = OperatorSpec(
    name='hr',
    node_type=ProportionalHazards,
    field='hr',
    identity=1.0,
    combine=operator.mul,
    multiplicative=True,
)

ACCELERATION_FACTOR = OperatorSpec(
    name='af',
    node_type=AcceleratedFailureTime,
    field='af',
    identity=1.0,
    combine=operator.mul,
    multiplicative=True,
)

ODDS_RATIO = OperatorSpec(
    name='or',
    node_type=ProportionalOdds,
    field='or_',
    identity=1.0,
    combine=operator.mul,
    multiplicative=True,
)

TIME_SHIFT = OperatorSpec(
    name='shift',
    node_type=Shift,
    field='shift',
    identity=0.0,
    combine=operator.add,
    multiplicative=False,
)


def _validate(spec: OperatorSpec, value: ArrayLike, log: bool) -> float:
    if spec.multiplicative:
        return check_ratio(value, spec.name, log=log)
    if log:
        raise ValueError(f"{spec.name} has no log scale")
    return check_finite_scalar(value, spec.name)


def _validate_combined(spec: OperatorSpec, value: float) -> float:
    # Products can under/overflow and sums can overflow.
    if spec.multiplicative:
        return check_positive_scalar(value, spec.name)
    return check_finite_scalar(value, spec.name)


def apply_operator(
    spec: OperatorSpec,
    expr: SurvivalExpr,
    value: ArrayLike,
    log: bool = False,
) -> SurvivalExpr:
    """
    Wrap ``expr`` with the operator described by ``spec``.

    Args:
        spec: One of the module-level operator specs
        expr: Expression to transform
        value: Scalar (or replicated scalar) parameter
        log: Whether ``value`` is on the log scale (ratios only)

    Returns:
        ``expr`` itself for an identity value, ``expr.base`` when combining
        cancels an existing wrapper, otherwise a new node

    Raises:
        InvalidArgumentError: If ``value`` or the combined scalar is invalid
    """
    scalar = _validate(spec, value, log)

    if scalar == spec.identity:
        return expr

    if type(expr) is spec.node_type:
        combined = _validate_combined(
            spec, spec.combine(getattr(expr, spec.field), scalar)
        )
        if combined == spec.identity:
            return expr.base
        return replace(expr, **{spec.field: combined})

    return spec.node_type(base=expr, **{spec.field: scalar})
