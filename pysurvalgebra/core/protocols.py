"""
Core protocols for pysurvalgebra.

These define the structural interfaces of the collaborators that consume
or feed an expression tree. We use Protocol (structural typing) rather
than ABC (nominal typing) so that fitted models from any library can be
used as leaves without inheriting from anything here.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - The expression tree is read-only to every collaborator
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

import pandas as pd


@runtime_checkable
class SurvivalEvaluator(Protocol):
    """
    Protocol for the numeric evaluator of an expression tree.

    The evaluator dispatches on node variant recursively (see
    ``pysurvalgebra.expressions.visitor.ExpressionVisitor``). This package
    ships no evaluator; it only fixes the shape of the tree handed over.
    """

    def compute_surv(
        self,
        expr: Any,
        times: Sequence[float],
        type: str = 'surv',
        **kwargs: Any,
    ) -> Sequence[float]:
        """
        Evaluate ``expr`` at ``times``.

        Args:
            expr: A SurvivalExpr
            times: Time points, ascending
            type: One of the result kinds in ``core.capabilities``

        Returns:
            One value per time point
        """
        ...


@runtime_checkable
class Summarizer(Protocol):
    """
    Callable producing a tabular summary of a survival expression.

    The frame must carry a ``time`` column; other columns are passed
    through untouched.
    """

    def __call__(self, expr: Any, **kwargs: Any) -> pd.DataFrame | list[pd.DataFrame]:
        ...
