"""Straight lines in the plane."""

import numpy as np

from consensus.models.capabilities import ModelCapabilities


def straight_line_through_two_points(sample: np.ndarray) -> np.ndarray:
    """
    Line (a, b, c) with a*x + b*y + c = 0 and a^2 + b^2 = 1.

    Coincident points give the zero model.
    """
    p, q = sample[0], sample[1]
    normal = np.array([q[1] - p[1], p[0] - q[0]])
    norm = np.hypot(normal[0], normal[1])
    if norm == 0:
        return np.zeros(3)
    a, b = normal / norm
    return np.array([a, b, -(a * p[0] + b * p[1])])


def distance_of_point_to_straight_line(model: np.ndarray, point: np.ndarray) -> float:
    """Perpendicular distance from the point to the line."""
    a, b, c = model
    n = np.hypot(a, b)
    if n == 0:
        return np.inf
    return float(abs(a * point[0] + b * point[1] + c) / n)


LINE = ModelCapabilities(
    name="line",
    datadim=2,
    modeldim=3,
    nfit=2,
    evaluate=distance_of_point_to_straight_line,
    generate=straight_line_through_two_points,
)
