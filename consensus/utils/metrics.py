"""Timing and fit quality metrics."""

import numpy as np
from typing import Callable, Dict
from time import time


class PerformanceMetrics:
    """Track performance metrics."""
    
    def __init__(self):
        self.start_times = {}
        self.durations = {}
    
    def start_timer(self, name: str):
        """Start timing an operation."""
        self.start_times[name] = time()
    
    def stop_timer(self, name: str) -> float:
        """Stop timing and return duration in milliseconds."""
        if name not in self.start_times:
            return 0.0
        duration = (time() - self.start_times[name]) * 1000
        self.durations[name] = duration
        return duration
    
    def get_summary(self) -> Dict[str, float]:
        """Get summary of all timings."""
        return self.durations.copy()


class FitMetrics:
    """Quality of a fitted model."""
    
    @staticmethod
    def inlier_ratio(ninliers: int, npoints: int) -> float:
        """Fraction of the data explained by the model."""
        return ninliers / npoints if npoints > 0 else 0.0
    
    @staticmethod
    def residual_statistics(data: np.ndarray, model: np.ndarray, mask: np.ndarray,
                            evaluate: Callable[[np.ndarray, np.ndarray], float]) -> Dict[str, float]:
        """Error statistics of the inliers under the model."""
        errors = np.array([evaluate(model, point) for point in data[mask]])
        if len(errors) == 0:
            return {
                'mean_error': 0.0,
                'median_error': 0.0,
                'max_error': 0.0,
                'rms_error': 0.0
            }
        return {
            'mean_error': float(np.mean(errors)),
            'median_error': float(np.median(errors)),
            'max_error': float(np.max(errors)),
            'rms_error': float(np.sqrt(np.mean(errors ** 2)))
        }
