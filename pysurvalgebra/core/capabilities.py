"""
String constants shared with evaluators and presentation layers.

This module is the SINGLE SOURCE OF TRUTH for result-kind and
summary-type strings. Import from here, never use raw strings.

Usage:
    from pysurvalgebra.core.capabilities import RESULT_SURVIVAL

    values = evaluator.compute_surv(expr, times, type=RESULT_SURVIVAL)
"""

# Survival probability from time zero
RESULT_SURVIVAL = 'surv'

# Conditional probability of an event within each interval
RESULT_PROBABILITY = 'prob'

ALL_RESULT_KINDS = frozenset({
    RESULT_SURVIVAL,
    RESULT_PROBABILITY,
})

# Summary with columns time / est / lcl / ucl, for plotting
SUMMARY_PLOT = 'plot'

# Summary exactly as produced by the wrapped distribution
SUMMARY_STANDARD = 'standard'

ALL_SUMMARY_TYPES = frozenset({
    SUMMARY_PLOT,
    SUMMARY_STANDARD,
})

__all__ = [
    'RESULT_SURVIVAL',
    'RESULT_PROBABILITY',
    'ALL_RESULT_KINDS',
    'SUMMARY_PLOT',
    'SUMMARY_STANDARD',
    'ALL_SUMMARY_TYPES',
]
