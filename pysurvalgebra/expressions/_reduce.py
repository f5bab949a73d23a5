"""
Pairwise left fold used to build chained projections.

Given a first element and a list of ``(element, boundary)`` pairs, each
pair is combined with the running accumulator in argument order, so the
first element ends up deepest in the resulting left-nested tree.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import reduce
from typing import TypeVar

T = TypeVar('T')
B = TypeVar('B')


def reduce_pairwise(
    first: T,
    pairs: Sequence[tuple[T, B]],
    combine: Callable[[T, T, B], T],
) -> T:
    """
    Fold ``pairs`` onto ``first`` from the left.

    Args:
        first: Seed of the fold
        pairs: ``(element, boundary)`` pairs in argument order
        combine: ``combine(accumulator, element, boundary)`` -> new accumulator

    Returns:
        ``combine(...combine(combine(first, e1, b1), e2, b2)..., en, bn)``
    """
    return reduce(
        lambda acc, pair: combine(acc, pair[0], pair[1]),
        pairs,
        first,
    )
