"""Fundamental matrices from seven point correspondences."""

import numpy as np
from scipy import linalg

from consensus.models.capabilities import ModelCapabilities

IMAG_TOLERANCE = 1e-8


def _epipolar_rows(sample: np.ndarray) -> np.ndarray:
    """One row per pair (x, y, x', y') so that row . vec(F) = x'^T F x."""
    ones = np.ones(len(sample))
    x = np.column_stack([sample[:, 0], sample[:, 1], ones])
    xp = np.column_stack([sample[:, 2], sample[:, 3], ones])
    return (xp[:, :, None] * x[:, None, :]).reshape(len(sample), 9)


def seven_point_algorithm(sample: np.ndarray) -> np.ndarray:
    """
    Rank two fundamental matrix through seven correspondences.

    The epipolar constraints leave a pencil a*F1 + (1 - a)*F2 of matrices;
    det = 0 is a cubic in a and its smallest real root is kept. The result
    is flattened row-major with unit Frobenius norm. Degenerate samples give
    a NaN model.
    """
    basis = linalg.null_space(_epipolar_rows(sample[:7]))
    if basis.shape[1] != 2:
        return np.full(9, np.nan)
    F1 = basis[:, 0].reshape(3, 3)
    F2 = basis[:, 1].reshape(3, 3)

    # det is a cubic in a: interpolate it from four values
    ts = np.array([-1.0, 0.0, 1.0, 2.0])
    dets = [np.linalg.det(t * F1 + (1 - t) * F2) for t in ts]
    coeffs = np.polyfit(ts, dets, 3)
    roots = np.roots(coeffs)
    real = np.sort(roots[np.abs(roots.imag) <= IMAG_TOLERANCE * np.maximum(1.0, np.abs(roots))].real)
    if len(real) == 0:
        return np.full(9, np.nan)

    F = real[0] * F1 + (1 - real[0]) * F2
    return (F / np.linalg.norm(F)).ravel()


def epipolar_algebraic_error(model: np.ndarray, pair: np.ndarray) -> float:
    """Algebraic epipolar error |x'^T F x|."""
    if not np.all(np.isfinite(model)):
        return np.inf
    F = np.asarray(model).reshape(3, 3)
    x = np.array([pair[0], pair[1], 1.0])
    xp = np.array([pair[2], pair[3], 1.0])
    return float(abs(xp @ F @ x))


FUNDAMENTAL_MATRIX = ModelCapabilities(
    name="fm",
    datadim=4,
    modeldim=9,
    nfit=7,
    evaluate=epipolar_algebraic_error,
    generate=seven_point_algorithm,
)
