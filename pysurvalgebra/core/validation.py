"""
Input validation utilities for pysurvalgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every operator constructor runs
its validators before building any node, so a partially built expression
is never observable.

Scalar control arguments may arrive replicated (e.g. ``[0.5, 0.5, 0.5]``
from a vectorised call site). They are accepted as long as they reduce to
exactly one distinct value.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysurvalgebra.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    UnsortedSequenceError,
)


def check_array(
    value: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a flat numeric numpy array.

    Args:
        value: Scalar or array-like to validate
        name: Parameter name for error messages

    Returns:
        1-D numpy.ndarray with floating dtype

    Raises:
        InvalidArgumentError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(value)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"{name}: cannot convert to array: {e}", name=name, value=value
        ) from e

    if result.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            name=name,
            value=value,
        )

    if not np.issubdtype(result.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            name=name,
            value=value,
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise InvalidArgumentError(
            f"{name}: complex dtype {result.dtype}, expected real numbers",
            name=name,
            value=value,
        )

    return result.astype(np.float64).ravel()


def check_single_scalar(value: ArrayLike, name: str) -> float:
    """
    Reduce a possibly replicated value to its one distinct value.

    Finiteness is not checked here; see ``check_finite_scalar``.

    Args:
        value: Scalar or array-like whose distinct values must number one
        name: Parameter name for error messages

    Returns:
        The single value as a Python float

    Raises:
        InvalidArgumentError: If empty or more than one distinct value
            is present
    """
    array = check_array(value, name)

    if array.size == 0:
        raise InvalidArgumentError(
            f"{name}: expected a single value, got an empty input",
            name=name,
            value=value,
        )

    distinct = np.unique(array)
    if distinct.size != 1:
        raise InvalidArgumentError(
            f"{name}: expected a single distinct value, got {distinct.size} "
            f"({distinct.tolist()})",
            name=name,
            value=value,
        )

    return float(distinct[0])


def check_finite_scalar(value: ArrayLike, name: str) -> float:
    """
    Reduce a possibly replicated value to one finite scalar.

    This is the base check for every control argument: shifts use it
    directly, ratios, cutpoints and weights add a sign constraint on top.

    Args:
        value: Scalar or array-like whose distinct values must number one
        name: Parameter name for error messages

    Returns:
        The single finite value as a Python float

    Raises:
        InvalidArgumentError: If empty, non-finite, or more than one
            distinct value is present
    """
    array = check_array(value, name)

    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidArgumentError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
            value=value,
        )

    return check_single_scalar(array, name)


def check_positive_scalar(value: ArrayLike, name: str) -> float:
    """
    Reduce to one finite scalar and require it to be strictly positive.

    Raises:
        InvalidArgumentError: If not a single finite value, or <= 0
    """
    scalar = check_finite_scalar(value, name)
    if scalar <= 0:
        raise InvalidArgumentError(
            f"{name}: must be strictly positive, got {scalar}",
            name=name,
            value=value,
        )
    return scalar


def check_nonnegative_scalar(value: ArrayLike, name: str) -> float:
    """
    Reduce to one finite scalar and require it to be >= 0.

    Raises:
        InvalidArgumentError: If not a single finite value, or < 0
    """
    scalar = check_finite_scalar(value, name)
    if scalar < 0:
        raise InvalidArgumentError(
            f"{name}: must be non-negative, got {scalar}",
            name=name,
            value=value,
        )
    return scalar


def check_ratio(value: ArrayLike, name: str, log: bool = False) -> float:
    """
    Validate a hazard ratio, acceleration factor or odds ratio.

    When ``log`` is True any finite value is accepted and exponentiated.
    The returned ratio is always finite and strictly positive, so an
    exponent that overflows to Inf or underflows to 0 is rejected.

    Args:
        value: Ratio (or log-ratio) to validate
        name: Parameter name for error messages
        log: Whether ``value`` is on the log scale

    Returns:
        The ratio on the natural scale

    Raises:
        InvalidArgumentError: If the ratio is invalid
    """
    if not log:
        return check_positive_scalar(value, name)

    log_ratio = check_finite_scalar(value, name)
    with np.errstate(over='ignore', under='ignore'):
        ratio = float(np.exp(log_ratio))
    if not np.isfinite(ratio) or ratio <= 0:
        raise InvalidArgumentError(
            f"{name}: exp({log_ratio}) = {ratio} is not a finite positive ratio",
            name=name,
            value=value,
        )
    return ratio


def check_min_members(members: Sequence[Any], min_count: int, name: str) -> None:
    """
    Verify a sequence has at least ``min_count`` elements.

    Raises:
        DimensionError: If the sequence is too short
    """
    n = len(members)
    if n < min_count:
        raise DimensionError(
            f"{name}: requires at least {min_count} elements, got {n}",
            name=name,
            expected=min_count,
            actual=n,
        )


def check_length(values: Sequence[Any], expected: int, name: str) -> None:
    """
    Verify a sequence has exactly ``expected`` elements.

    Raises:
        DimensionError: If the length differs
    """
    n = len(values)
    if n != expected:
        raise DimensionError(
            f"{name}: expected {expected} elements, got {n}",
            name=name,
            expected=expected,
            actual=n,
        )


def check_consistent_length(
    *sequences: Sequence[Any],
    names: tuple[str, ...],
) -> None:
    """
    Verify all sequences have the same length.

    Args:
        *sequences: Sequences to check
        names: Parameter names for error messages (must match number of sequences)

    Raises:
        ValueError: If number of names doesn't match number of sequences
        DimensionError: If sequences have inconsistent lengths
    """
    if len(sequences) != len(names):
        raise ValueError(
            f"Number of sequences ({len(sequences)}) must match number of names ({len(names)})"
        )

    if len(sequences) < 2:
        return

    lengths = [len(seq) for seq in sequences]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(
            f"Inconsistent lengths: {details}",
            name=names[-1],
            expected=lengths[0],
            actual=lengths[-1],
        )


def check_sorted(
    values: Sequence[float],
    name: str,
    strict: bool = True,
) -> None:
    """
    Verify a sequence of scalars is in ascending order.

    Args:
        values: Already-validated scalars
        name: Parameter name for error messages
        strict: If True, consecutive values must strictly increase;
            otherwise equal neighbours are allowed

    Raises:
        UnsortedSequenceError: At the first element that breaks the ordering
    """
    for i in range(1, len(values)):
        previous, current = values[i - 1], values[i]
        if current < previous or (strict and current == previous):
            relation = "strictly increasing" if strict else "non-decreasing"
            raise UnsortedSequenceError(
                f"{name}: must be {relation}, but element {i} ({current}) "
                f"follows {previous}",
                name=name,
                index=i,
                values=tuple(values),
            )
