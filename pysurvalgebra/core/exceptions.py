"""
Exception hierarchy for pysurvalgebra.

All exceptions inherit from SurvAlgebraError to allow catching any
library-specific error. Every error raised by this package is a
construction-time input error: nothing here is transient or retryable.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class SurvAlgebraError(Exception):
    """Base exception for all pysurvalgebra errors."""
    pass


class ValidationError(SurvAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, always before
    any expression node is built.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    A control argument is malformed.

    Raised when a scalar argument (hazard ratio, acceleration factor, odds
    ratio, shift, cutpoint, weight) is not single-valued, not finite, has
    the wrong sign, or when a distribution argument is not usable as a
    survival expression.

    Attributes:
        name: Parameter name, if known
        value: The offending value, if available
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class DimensionError(InvalidArgumentError):
    """
    Argument counts are incorrect or inconsistent.

    Raised when too few distributions are given, or when the number of
    cutpoints or weights does not match the number of distributions.

    Attributes:
        expected: Expected count (or minimum count)
        actual: Count actually received
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message, name=name)
        self.expected = expected
        self.actual = actual


class UnsortedSequenceError(InvalidArgumentError):
    """
    A sequence that must be ascending is not.

    Attributes:
        name: Parameter name
        index: Position of the first element that breaks the ordering
        values: The full sequence as received
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        index: int | None = None,
        values: tuple[float, ...] | None = None,
    ):
        super().__init__(message, name=name, value=values)
        self.index = index
        self.values = values
