"""Basic usage example for consensus."""

import numpy as np
from consensus import RANSAC, ModelCapabilities, get_model_case


def main():
    """Fit a built-in line model and a caller defined plane model."""
    rng = np.random.default_rng(0)
    
    # Line with outliers
    x = rng.uniform(0, 10, 80)
    points = np.column_stack([x, 0.7 * x + 2 + rng.normal(0, 0.05, 80)])
    points[:20] = rng.uniform(0, 20, size=(20, 2))
    
    print("Fitting line...")
    result = RANSAC(max_error=0.2, ntrials=200, min_inliers=40, rng=1).fit(points, get_model_case("line"))
    if result.found:
        print(f"Found line {result.model} with {result.ninliers} inliers")
    else:
        print("No line found")
    
    # Plane z = a*x + b*y + c, supplied by the caller
    def plane_through_three_points(sample):
        A = np.column_stack([sample[:, :2], np.ones(3)])
        try:
            return np.linalg.solve(A, sample[:, 2])
        except np.linalg.LinAlgError:
            return np.full(3, np.nan)
    
    def vertical_distance(model, point):
        return abs(model[0] * point[0] + model[1] * point[1] + model[2] - point[2])
    
    plane = ModelCapabilities(
        name="plane", datadim=3, modeldim=3, nfit=3,
        evaluate=vertical_distance,
        generate=plane_through_three_points,
        accept=lambda m: bool(np.all(np.isfinite(m))),
    )
    
    xy = rng.uniform(-5, 5, size=(100, 2))
    cloud = np.column_stack([xy, 0.1 * xy[:, 0] - 0.3 * xy[:, 1] + 1])
    cloud[:30, 2] += rng.uniform(1, 5, 30)
    
    print("Fitting plane...")
    result = RANSAC(max_error=0.01, ntrials=100, min_inliers=50, rng=2).fit(cloud, plane)
    print(f"Found plane {result.model} with {result.ninliers} inliers" if result.found
          else "No plane found")


if __name__ == "__main__":
    main()
