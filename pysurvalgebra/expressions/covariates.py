"""
Covariate binder: builds the row table attached to a CovariateModel.

Named assignments become a single leading row; an optional external table
contributes its rows afterwards, in their original order. Rows are never
deduplicated and column sets are not reconciled: mismatched columns are
filled with NaN by pandas and reported with a UserWarning, leaving the
evaluator to reject the table if it cannot use it.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import Any

import pandas as pd

from pysurvalgebra.core.exceptions import InvalidArgumentError
from pysurvalgebra.core.validation import check_min_members


def _assignment_frame(covariates: Mapping[str, Any] | pd.DataFrame | None) -> pd.DataFrame | None:
    if covariates is None:
        return None

    if isinstance(covariates, pd.DataFrame):
        return covariates if len(covariates) > 0 else None

    if not isinstance(covariates, Mapping):
        raise InvalidArgumentError(
            f"covariates: expected a mapping or DataFrame, got {type(covariates).__name__}",
            name="covariates",
            value=covariates,
        )

    if not covariates:
        return None

    for key, value in covariates.items():
        if not pd.api.types.is_scalar(value):
            raise InvalidArgumentError(
                f"covariates: '{key}' must be a single value, got {type(value).__name__}; "
                f"pass multiple rows through data instead",
                name=str(key),
                value=value,
            )

    return pd.DataFrame([dict(covariates)])


def bind_covariates(
    covariates: Mapping[str, Any] | pd.DataFrame | None = None,
    data: pd.DataFrame | None = None,
    stacklevel: int = 2,
) -> pd.DataFrame:
    """
    Row-bind explicit covariate values with an optional covariate table.

    Parameters
    ----------
    covariates : mapping, DataFrame or None
        Named scalar assignments (one row), or a ready-made frame.
    data : DataFrame or None
        Additional rows, e.g. one per subject of a heterogeneous cohort.
    stacklevel : int
        Passed to ``warnings.warn`` so a column mismatch is reported at
        the user's call site when called through wrapper functions.

    Returns
    -------
    DataFrame
        New frame with a fresh RangeIndex: assignment rows first, then
        ``data`` rows in order.

    Raises
    ------
    InvalidArgumentError
        If an assignment is not a scalar or ``data`` is not a DataFrame.
    DimensionError
        If no rows result.
    """
    if data is not None and not isinstance(data, pd.DataFrame):
        raise InvalidArgumentError(
            f"data: expected a pandas DataFrame, got {type(data).__name__}",
            name="data",
            value=data,
        )

    frames = [
        frame
        for frame in (_assignment_frame(covariates), data)
        if frame is not None and len(frame) > 0
    ]
    check_min_members(frames, 1, "covariate rows")

    if len(frames) == 2:
        head, tail = frames
        if set(head.columns) != set(tail.columns):
            warnings.warn(
                f"Covariate columns differ between assignments {list(head.columns)} "
                f"and data {list(tail.columns)}; missing values will be NaN",
                UserWarning,
                stacklevel=stacklevel,
            )

    return pd.concat(frames, ignore_index=True, sort=False).copy()
