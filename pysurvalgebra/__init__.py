"""
pysurvalgebra: composable survival distributions for decision modeling.

Build time-to-event models for health-economic analyses by combining
fitted or defined distributions with operators: join, mix, apply_hr,
apply_af, apply_or, apply_shift, add_hazards and set_covariates. The
result is an immutable expression tree handed to an external evaluator.

Submodules:
    expressions: Expression nodes and the operators that build them
    core: Exceptions, validators, protocols
"""

__version__ = "0.1.0"

from pysurvalgebra import core
from pysurvalgebra import expressions
from pysurvalgebra.expressions import (
    join,
    mix,
    add_hazards,
    apply_hr,
    apply_af,
    apply_or,
    apply_shift,
    set_covariates,
)

__all__ = [
    "__version__",
    "core",
    "expressions",
    "join",
    "mix",
    "add_hazards",
    "apply_hr",
    "apply_af",
    "apply_or",
    "apply_shift",
    "set_covariates",
]
