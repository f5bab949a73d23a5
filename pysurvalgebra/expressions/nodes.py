"""
Survival expression nodes: the immutable composite tree.

A survival expression is either a ``Base`` leaf wrapping an externally
fitted or defined distribution, or one of a closed set of operator nodes
that own their child expressions. Nodes are frozen dataclasses; the
constructors in ``operators`` validate arguments and apply collapse rules,
so build trees through those rather than instantiating nodes directly.

Sub-expressions may be shared freely between trees since nothing is ever
mutated after construction.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

import pandas as pd


class NodeKind(Enum):
    """Tag identifying each variant of the closed node set."""

    BASE = "base"
    PROJECTION = "projection"
    POOLED = "pooled"
    PROPORTIONAL_HAZARDS = "proportional_hazards"
    ACCELERATED_FAILURE_TIME = "accelerated_failure_time"
    PROPORTIONAL_ODDS = "proportional_odds"
    SHIFT = "shift"
    ADDITIVE_HAZARDS = "additive_hazards"
    COVARIATE_MODEL = "covariate_model"


class SurvivalExpr(ABC):
    """
    Base class for all survival expression nodes.

    This class is structure only: evaluation belongs to an external
    evaluator (see ``core.protocols.SurvivalEvaluator``), and dispatch over
    the variants goes through ``visitor.ExpressionVisitor``.
    """

    kind: ClassVar[NodeKind]

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        """Direct child expressions, in order."""
        return ()


@dataclass(frozen=True, eq=False)
class Base(SurvivalExpr):
    """
    Leaf wrapping an opaque distribution handle.

    The handle is stored by reference and never inspected. Equality and
    hashing use the identity of the handle, so two leaves are equal only
    when they wrap the very same fitted object.

    Attributes:
        handle: Fitted model or defined parametric distribution
        label: Optional display name
    """

    kind: ClassVar[NodeKind] = NodeKind.BASE

    handle: Any
    label: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base):
            return NotImplemented
        return self.handle is other.handle and self.label == other.label

    def __hash__(self) -> int:
        return hash((id(self.handle), self.label))


@dataclass(frozen=True)
class Projection(SurvivalExpr):
    """
    ``early`` before time ``at``, ``late`` (re-based to start at ``at``) after.

    Chains built by ``join`` are left-nested: the first distribution is the
    deepest ``early`` branch.
    """

    kind: ClassVar[NodeKind] = NodeKind.PROJECTION

    early: SurvivalExpr
    late: SurvivalExpr
    at: float

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.early, self.late)


@dataclass(frozen=True)
class Pooled(SurvivalExpr):
    """
    Weighted mixture of two or more expressions.

    ``weights[i]`` belongs to ``members[i]``. Weights are non-negative but
    are not normalised here.
    """

    kind: ClassVar[NodeKind] = NodeKind.POOLED

    members: tuple[SurvivalExpr, ...]
    weights: tuple[float, ...]

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return self.members


@dataclass(frozen=True)
class ProportionalHazards(SurvivalExpr):
    """Hazard of ``base`` multiplied by ``hr`` (> 0, never 1)."""

    kind: ClassVar[NodeKind] = NodeKind.PROPORTIONAL_HAZARDS

    base: SurvivalExpr
    hr: float

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.base,)


@dataclass(frozen=True)
class AcceleratedFailureTime(SurvivalExpr):
    """Event time of ``base`` rescaled by ``af`` (> 0, never 1)."""

    kind: ClassVar[NodeKind] = NodeKind.ACCELERATED_FAILURE_TIME

    base: SurvivalExpr
    af: float

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.base,)


@dataclass(frozen=True)
class ProportionalOdds(SurvivalExpr):
    """Odds of an event under ``base`` multiplied by ``or_`` (> 0, never 1)."""

    kind: ClassVar[NodeKind] = NodeKind.PROPORTIONAL_ODDS

    base: SurvivalExpr
    or_: float

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.base,)


@dataclass(frozen=True)
class Shift(SurvivalExpr):
    """
    ``base`` with its time origin moved by ``shift`` (finite, never 0).

    A positive shift moves the curve backward: evaluating at ``t`` is
    evaluating ``base`` at ``t - shift``.
    """

    kind: ClassVar[NodeKind] = NodeKind.SHIFT

    base: SurvivalExpr
    shift: float

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.base,)


@dataclass(frozen=True)
class AdditiveHazards(SurvivalExpr):
    """Independent hazards of ``members`` summed. A single member is allowed."""

    kind: ClassVar[NodeKind] = NodeKind.ADDITIVE_HAZARDS

    members: tuple[SurvivalExpr, ...]

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return self.members


@dataclass(frozen=True, eq=False)
class CovariateModel(SurvivalExpr):
    """
    ``base`` conditioned on one or more covariate rows.

    Construct via ``from_frame``, which takes a private copy of the table.
    The stored frame is never handed out: ``covariates`` returns a fresh
    copy, so callers cannot change the node after construction. Nodes
    compare equal when their bases are equal and their frames are equal
    per ``DataFrame.equals``; they are not hashable.
    """

    kind: ClassVar[NodeKind] = NodeKind.COVARIATE_MODEL

    base: SurvivalExpr
    _covariates: pd.DataFrame = field(repr=False)

    @classmethod
    def from_frame(cls, base: SurvivalExpr, covariates: pd.DataFrame) -> CovariateModel:
        """Build a node owning a copy of ``covariates``."""
        return cls(base=base, _covariates=covariates.copy())

    @property
    def covariates(self) -> pd.DataFrame:
        """Copy of the covariate rows, one row per subject or group."""
        return self._covariates.copy()

    @property
    def children(self) -> tuple[SurvivalExpr, ...]:
        return (self.base,)

    @property
    def n_rows(self) -> int:
        """Number of covariate rows (subjects or groups)."""
        return len(self._covariates)

    @property
    def columns(self) -> tuple[str, ...]:
        """Covariate names."""
        return tuple(self._covariates.columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CovariateModel):
            return NotImplemented
        return self.base == other.base and self._covariates.equals(other._covariates)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"CovariateModel(base={self.base!r}, "
            f"n_rows={self.n_rows}, columns={list(self.columns)})"
        )


ALL_NODE_TYPES: tuple[type[SurvivalExpr], ...] = (
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
