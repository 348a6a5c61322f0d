"""Scoring of a single model against a data set."""

import numpy as np
from typing import Callable, Optional, Tuple

from consensus.engine.errors import NegativeErrorValue

ErrorFunction = Callable[[np.ndarray, np.ndarray], float]


def ransac_trial(data: np.ndarray, model: np.ndarray, max_error: float,
                 evaluate: ErrorFunction,
                 out: Optional[np.ndarray] = None) -> Tuple[np.ndarray, int]:
    """
    Evaluate a model over the data and mark the inliers.

    A point is an inlier when its error is strictly below ``max_error``.

    Args:
        data: (N, D) array of data points
        model: Model parameters
        max_error: Maximum allowed error
        evaluate: Function (model, point) -> non-negative error
        out: Optional preallocated boolean mask of length N

    Returns:
        Tuple of (inlier mask, number of inliers)

    Raises:
        NegativeErrorValue: If the evaluation function returns a negative or NaN error
    """
    n = len(data)
    if out is None:
        out = np.empty(n, dtype=bool)
    elif out.shape != (n,):
        raise ValueError(f"mask buffer has shape {out.shape}, expected ({n},)")

    count = 0
    for i in range(n):
        e = evaluate(model, data[i])
        if not e >= 0:
            raise NegativeErrorValue(i, e)
        out[i] = e < max_error
        if out[i]:
            count += 1
    return out, count
