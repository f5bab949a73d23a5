"""
Public API for composing survival expressions.

    join_sequence(dists, cutpoints) -> Projection     # join(d1, 10, d2, ...)
    mix_sequence(dists, weights) -> Pooled            # mix(d1, .3, d2, .7)
    add_hazards_sequence(dists) -> AdditiveHazards    # add_hazards(d1, d2)
    apply_hr / apply_af / apply_or / apply_shift      # collapsing wrappers
    set_covariates(dist, data=None, **values) -> CovariateModel

Each function validates every argument first and only then builds nodes,
so a failed call never leaves a partial tree behind. Distributions may be
given as SurvivalExpr nodes or as raw fitted objects, which are wrapped
in a Base leaf.

The interleaved forms (``join``, ``mix``) are convenience wrappers that
split ``(dist, value, dist, value, ..., dist)`` into the two sequences
taken by the ``*_sequence`` functions.
"""

from __future__ import annotations

import numbers
import warnings
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from pysurvalgebra.core.exceptions import InvalidArgumentError
from pysurvalgebra.core.validation import (
    check_consistent_length,
    check_length,
    check_min_members,
    check_nonnegative_scalar,
    check_sorted,
)
from pysurvalgebra.expressions._collapse import (
    ACCELERATION_FACTOR,
    HAZARD_RATIO,
    ODDS_RATIO,
    TIME_SHIFT,
    apply_operator,
)
from pysurvalgebra.expressions._reduce import reduce_pairwise
from pysurvalgebra.expressions.covariates import bind_covariates
from pysurvalgebra.expressions.nodes import (
    AdditiveHazards,
    Base,
    CovariateModel,
    Pooled,
    Projection,
    SurvivalExpr,
)

# Values that cannot be a distribution handle: almost always a cutpoint or
# weight that ended up in a distribution slot.
_NOT_A_DISTRIBUTION = (
    numbers.Number,
    np.ndarray,
    str,
    bytes,
    list,
    tuple,
    pd.DataFrame,
    pd.Series,
)


def as_expression(obj: Any, label: str | None = None) -> SurvivalExpr:
    """
    Return ``obj`` as a survival expression.

    Nodes are returned unchanged; any other object is treated as an opaque
    fitted or defined distribution and wrapped in a Base leaf.

    Parameters
    ----------
    obj : SurvivalExpr or distribution handle
    label : str or None
        Display name for a newly created leaf. Ignored for nodes.

    Raises
    ------
    InvalidArgumentError
        If ``obj`` is None, a number, a string, or an array/table.
    """
    if isinstance(obj, SurvivalExpr):
        return obj
    if obj is None or isinstance(obj, _NOT_A_DISTRIBUTION):
        raise InvalidArgumentError(
            f"Expected a survival distribution, got {type(obj).__name__} ({obj!r})",
            name="dist",
            value=obj,
        )
    return Base(handle=obj, label=label)


def _as_expressions(dists: Iterable[Any]) -> list[SurvivalExpr]:
    return [as_expression(d) for d in dists]


def _split_interleaved(args: tuple[Any, ...]) -> tuple[list[Any], list[Any]]:
    return list(args[0::2]), list(args[1::2])


# ═══════════════════════════════════════════════════════════════════════
# Projection
# ═══════════════════════════════════════════════════════════════════════


def join_sequence(
    dists: Iterable[Any],
    cutpoints: Iterable[ArrayLike],
    *,
    allow_ties: bool = False,
) -> Projection:
    """
    Project survival from one distribution onto the next at each cutpoint.

    ``join_sequence([d1, d2, d3], [10, 20])`` uses ``d1`` until 10, ``d2``
    from 10 until 20 and ``d3`` afterwards. The result is left-nested:
    ``Projection(Projection(d1, d2, 10), d3, 20)``.

    Parameters
    ----------
    dists : iterable
        Two or more distributions.
    cutpoints : iterable
        ``len(dists) - 1`` finite, non-negative, ascending times. Each may
        be given replicated as long as it has a single distinct value.
    allow_ties : bool
        Accept equal consecutive cutpoints (non-decreasing order). By
        default cutpoints must strictly increase.

    Returns
    -------
    Projection

    Raises
    ------
    DimensionError
        Fewer than two distributions, or wrong number of cutpoints.
    InvalidArgumentError
        A cutpoint is not a single finite non-negative value.
    UnsortedSequenceError
        Cutpoints are out of order.
    """
    exprs = _as_expressions(dists)
    cutpoints = list(cutpoints)

    check_min_members(exprs, 2, "dists")
    check_length(cutpoints, len(exprs) - 1, "cutpoints")
    at = [
        check_nonnegative_scalar(c, f"cutpoints[{i}]")
        for i, c in enumerate(cutpoints)
    ]
    check_sorted(at, "cutpoints", strict=not allow_ties)

    return reduce_pairwise(
        exprs[0],
        list(zip(exprs[1:], at)),
        lambda acc, expr, cut: Projection(early=acc, late=expr, at=cut),
    )


def join(*args: Any, allow_ties: bool = False) -> Projection:
    """
    Interleaved form of ``join_sequence``.

    Example:
        >>> join(d1, 10, d2, 20, d3)
    """
    dists, cutpoints = _split_interleaved(args)
    return join_sequence(dists, cutpoints, allow_ties=allow_ties)


# ═══════════════════════════════════════════════════════════════════════
# Mixture
# ═══════════════════════════════════════════════════════════════════════


def mix_sequence(dists: Iterable[Any], weights: Iterable[ArrayLike]) -> Pooled:
    """
    Weighted mixture of two or more distributions.

    Weights must be finite and non-negative but need not sum to one;
    normalisation is left to the evaluator.

    Raises
    ------
    DimensionError
        Fewer than two distributions, or weight count differs.
    InvalidArgumentError
        A weight is not a single finite non-negative value.
    """
    exprs = _as_expressions(dists)
    weights = list(weights)

    check_min_members(exprs, 2, "dists")
    check_consistent_length(exprs, weights, names=("dists", "weights"))
    checked = tuple(
        check_nonnegative_scalar(w, f"weights[{i}]") for i, w in enumerate(weights)
    )

    return Pooled(members=tuple(exprs), weights=checked)


def mix(*args: Any) -> Pooled:
    """
    Interleaved form of ``mix_sequence``.

    Example:
        >>> mix(d1, 0.25, d2, 0.75)
    """
    dists, weights = _split_interleaved(args)
    return mix_sequence(dists, weights)


# ═══════════════════════════════════════════════════════════════════════
# Additive hazards
# ═══════════════════════════════════════════════════════════════════════


def add_hazards_sequence(dists: Iterable[Any]) -> AdditiveHazards:
    """
    Combine the independent hazards of one or more distributions.

    A single member is kept as an AdditiveHazards node; it is not
    collapsed to the member itself.

    Raises
    ------
    DimensionError
        If no distributions are given.
    """
    exprs = _as_expressions(dists)
    check_min_members(exprs, 1, "dists")
    return AdditiveHazards(members=tuple(exprs))


def add_hazards(*dists: Any) -> AdditiveHazards:
    """Variadic form of ``add_hazards_sequence``."""
    return add_hazards_sequence(dists)


# ═══════════════════════════════════════════════════════════════════════
# Scalar wrappers
# ═══════════════════════════════════════════════════════════════════════


def apply_hr(dist: Any, hr: ArrayLike, log_hr: bool = False) -> SurvivalExpr:
    """
    Proportionally increase or reduce the hazard of a distribution.

    ``apply_hr(d, 1)`` returns ``d`` itself, and applying a hazard ratio
    to a ProportionalHazards node multiplies into it instead of nesting:
    ``apply_hr(apply_hr(d, 2), 3) == apply_hr(d, 6)`` and
    ``apply_hr(apply_hr(d, 2), 0.5) is d``.

    Parameters
    ----------
    dist : SurvivalExpr or distribution handle
    hr : float
        Hazard ratio (> 0), or log hazard ratio if ``log_hr``.
    log_hr : bool
        Exponentiate ``hr`` before applying.
    """
    return apply_operator(HAZARD_RATIO, as_expression(dist), hr, log=log_hr)


def apply_af(dist: Any, af: ArrayLike, log_af: bool = False) -> SurvivalExpr:
    """
    Proportionally increase or reduce the time to event of a distribution.

    Collapses like ``apply_hr``.
    """
    return apply_operator(ACCELERATION_FACTOR, as_expression(dist), af, log=log_af)


def apply_or(dist: Any, or_: ArrayLike, log_or: bool = False) -> SurvivalExpr:
    """
    Proportionally increase or reduce the odds of an event.

    Collapses like ``apply_hr``.
    """
    return apply_operator(ODDS_RATIO, as_expression(dist), or_, log=log_or)


def apply_shift(dist: Any, shift: ArrayLike) -> SurvivalExpr:
    """
    Shift a distribution in time.

    A positive shift moves the curve backwards: with a shift of 4, time 5
    is evaluated as time 1. Shifts add up when applied to a Shift node,
    and ``apply_shift(d, 0)`` returns ``d`` unchanged.
    """
    return apply_operator(TIME_SHIFT, as_expression(dist), shift)


# ═══════════════════════════════════════════════════════════════════════
# Covariates
# ═══════════════════════════════════════════════════════════════════════


def _set_covariates(
    dist: Any,
    covariates: Mapping[str, Any] | pd.DataFrame | None,
    data: pd.DataFrame | None,
    stacklevel: int,
) -> CovariateModel:
    expr = as_expression(dist)
    table = bind_covariates(covariates, data, stacklevel=stacklevel)
    return CovariateModel.from_frame(expr, table)


def set_covariates_frame(
    dist: Any,
    covariates: Mapping[str, Any] | pd.DataFrame | None,
    data: pd.DataFrame | None = None,
) -> CovariateModel:
    """
    Condition a fitted model on covariate rows.

    Parameters
    ----------
    dist : SurvivalExpr or fitted model handle
    covariates : mapping, DataFrame or None
        Explicit covariate values; a mapping gives a single row.
    data : DataFrame or None
        Further rows, appended after ``covariates``.

    Returns
    -------
    CovariateModel
    """
    # caller -> set_covariates_frame -> _set_covariates -> bind_covariates
    return _set_covariates(dist, covariates, data, stacklevel=4)


def set_covariates(
    dist: Any,
    data: pd.DataFrame | None = None,
    **covariates: Any,
) -> CovariateModel:
    """
    Keyword form of ``set_covariates_frame``.

    Example:
        >>> good = set_covariates(fit, group="Good")
        >>> cohort = set_covariates(fit, data=pd.DataFrame({"group": ["Good", "Poor"]}))
    """
    return _set_covariates(dist, covariates or None, data, stacklevel=4)


# ═══════════════════════════════════════════════════════════════════════
# Deprecated names
# ═══════════════════════════════════════════════════════════════════════


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"'{old}()' is deprecated, use '{new}()' instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def project(*args: Any, allow_ties: bool = False) -> Projection:
    """Deprecated alias of ``join``."""
    _deprecated("project", "join")
    return join(*args, allow_ties=allow_ties)


def project_sequence(
    dists: Iterable[Any],
    cutpoints: Iterable[ArrayLike],
    *,
    allow_ties: bool = False,
) -> Projection:
    """Deprecated alias of ``join_sequence``."""
    _deprecated("project_sequence", "join_sequence")
    return join_sequence(dists, cutpoints, allow_ties=allow_ties)


def pool(*args: Any) -> Pooled:
    """Deprecated alias of ``mix``."""
    _deprecated("pool", "mix")
    return mix(*args)


def pool_sequence(dists: Iterable[Any], weights: Iterable[ArrayLike]) -> Pooled:
    """Deprecated alias of ``mix_sequence``."""
    _deprecated("pool_sequence", "mix_sequence")
    return mix_sequence(dists, weights)
