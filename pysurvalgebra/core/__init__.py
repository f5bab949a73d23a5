"""
Core infrastructure for pysurvalgebra.

Shared abstractions used by the expression module.

Key components:
    protocols: SurvivalEvaluator, Summarizer protocols
    exceptions: Exception hierarchy
    validation: Input validators
    capabilities: Result-kind and summary-type constants
"""

from pysurvalgebra.core.protocols import SurvivalEvaluator, Summarizer
from pysurvalgebra.core.exceptions import (
    SurvAlgebraError,
    ValidationError,
    InvalidArgumentError,
    DimensionError,
    UnsortedSequenceError,
)

__all__ = [
    # Protocols
    "SurvivalEvaluator",
    "Summarizer",
    # Exceptions
    "SurvAlgebraError",
    "ValidationError",
    "InvalidArgumentError",
    "DimensionError",
    "UnsortedSequenceError",
]
