"""
Thin queries used by plotting and summary layers.

Neither function renders anything; they expose the parts of a tree a
presentation layer needs: the top-level join time to mark on a plot, and
the summary of a shifted distribution moved along the time axis.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from pysurvalgebra.core.capabilities import (
    ALL_SUMMARY_TYPES,
    SUMMARY_PLOT,
)
from pysurvalgebra.core.exceptions import InvalidArgumentError
from pysurvalgebra.core.protocols import Summarizer
from pysurvalgebra.expressions.nodes import Projection, Shift, SurvivalExpr

_PLOT_COLUMNS = {"surv": "est", "lower": "lcl", "upper": "ucl"}


def join_points(expr: SurvivalExpr) -> tuple[float, ...]:
    """
    Times at which ``expr`` switches distribution, top level only.

    Returns ``(expr.at,)`` for a Projection root and ``()`` otherwise;
    projections nested under other operators are not reported.
    """
    if isinstance(expr, Projection):
        return (expr.at,)
    return ()


def shifted_summary(
    expr: Shift,
    summarize: Summarizer,
    summary_type: str = SUMMARY_PLOT,
    **kwargs: Any,
) -> pd.DataFrame:
    """
    Summary of the wrapped distribution with times moved by ``expr.shift``.

    Parameters
    ----------
    expr : Shift
    summarize : callable
        ``summarize(expr.base, **kwargs)`` returning a DataFrame with a
        ``time`` column, or a one-element list of such frames.
    summary_type : {"plot", "standard"}
        "plot" renames ``surv``/``lower``/``upper`` to ``est``/``lcl``/``ucl``
        where present and keeps ``time, est, lcl, ucl``; "standard" leaves
        columns untouched.

    Returns
    -------
    DataFrame
        A new frame; the frame returned by ``summarize`` is not modified.
    """
    if not isinstance(expr, Shift):
        raise InvalidArgumentError(
            f"shifted_summary requires a Shift node, got {type(expr).__name__}",
            name="expr",
            value=expr,
        )
    if summary_type not in ALL_SUMMARY_TYPES:
        raise InvalidArgumentError(
            f"summary_type must be one of {sorted(ALL_SUMMARY_TYPES)}, got '{summary_type}'",
            name="summary_type",
            value=summary_type,
        )

    res = summarize(expr.base, **kwargs)
    if isinstance(res, list) and len(res) == 1:
        res = res[0]
    if not isinstance(res, pd.DataFrame) or "time" not in res.columns:
        raise InvalidArgumentError(
            "summarize must return a DataFrame with a 'time' column",
            name="summarize",
            value=res,
        )

    res = res.copy()
    if summary_type == SUMMARY_PLOT and "surv" in res.columns:
        res = res.rename(columns=_PLOT_COLUMNS)
        res = res[[c for c in ("time", "est", "lcl", "ucl") if c in res.columns]].copy()
    res["time"] = res["time"] + expr.shift
    return res
