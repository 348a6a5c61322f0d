"""Affine maps of the plane estimated from point correspondences."""

import numpy as np
from scipy import linalg

from consensus.models.capabilities import ModelCapabilities

MIN_SINGULAR_VALUE = 0.1
MAX_SINGULAR_VALUE = 10.0


def affine_map_from_three_pairs(sample: np.ndarray) -> np.ndarray:
    """
    Affine map sending each (x, y) of the sample to its (x', y').

    Rows of the sample are (x, y, x', y'). The model (a, b, c, d, e, f)
    maps x' = a*x + b*y + c and y' = d*x + e*y + f. Collinear samples give
    a NaN model.
    """
    src = np.column_stack([sample[:3, :2], np.ones(3)])
    try:
        abc = linalg.solve(src, sample[:3, 2])
        def_ = linalg.solve(src, sample[:3, 3])
    except linalg.LinAlgError:
        return np.full(6, np.nan)
    return np.concatenate([abc, def_])


def apply_affine_map(model: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Apply the affine map to an (N, 2) array of points."""
    A = np.asarray(model).reshape(2, 3)
    points_h = np.hstack([points, np.ones((points.shape[0], 1))])
    return points_h @ A.T


def affine_match_error(model: np.ndarray, pair: np.ndarray) -> float:
    """Distance between the mapped point and its correspondent."""
    if not np.all(np.isfinite(model)):
        return np.inf
    a, b, c, d, e, f = model
    x, y, xp, yp = pair
    return float(np.hypot(a * x + b * y + c - xp, d * x + e * y + f - yp))


def affine_map_is_reasonable(model: np.ndarray) -> bool:
    """Reject singular, orientation reversing or strongly distorting maps."""
    if not np.all(np.isfinite(model)):
        return False
    linear = np.array([[model[0], model[1]], [model[3], model[4]]])
    if np.linalg.det(linear) <= 0:
        return False
    s = np.linalg.svd(linear, compute_uv=False)
    return bool(s[-1] >= MIN_SINGULAR_VALUE and s[0] <= MAX_SINGULAR_VALUE)


AFFINE = ModelCapabilities(
    name="aff",
    datadim=4,
    modeldim=6,
    nfit=3,
    evaluate=affine_match_error,
    generate=affine_map_from_three_pairs,
)

AFFINE_REASONABLE = ModelCapabilities(
    name="affn",
    datadim=4,
    modeldim=6,
    nfit=3,
    evaluate=affine_match_error,
    generate=affine_map_from_three_pairs,
    accept=affine_map_is_reasonable,
)
