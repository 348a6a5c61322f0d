"""
Consensus Core Processor
Main entry point for fitting a named model family to a data set
"""

from typing import Dict, Any, Optional, Union
from datetime import datetime
import logging
import numpy as np

from consensus import __version__
from consensus.config import DEFAULT_CONFIG, merge_config
from consensus.engine.ransac import RANSAC, RansacResult, as_data
from consensus.models import ModelCapabilities, get_model_case
from consensus.utils.metrics import PerformanceMetrics, FitMetrics

logger = logging.getLogger(__name__)


class ConsensusProcessor:
    """Runs the consensus search and reports the outcome"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize consensus processor

        Args:
            config: Configuration dictionary (optional), merged over the defaults
        """
        self.config = merge_config(DEFAULT_CONFIG, config or {})
        self.version = __version__
        self.metrics = PerformanceMetrics()
        self.last_result: Optional[RansacResult] = None

    def process(self, data, model_case: Union[str, ModelCapabilities],
                seed: Optional[int] = None) -> Dict[str, Any]:
        """
        Fit a model family to the data

        Args:
            data: (N, D) array or flat buffer of values
            model_case: Model id (e.g. "line") or capability set
            seed: Random seed, overrides the configured one

        Returns:
            Dictionary describing the fitted model

        Raises:
            ConsensusError: On fatal sampling or evaluation errors
        """
        if isinstance(model_case, str):
            model_case = get_model_case(model_case)
        if seed is None:
            seed = self.config["ransac"]["seed"]

        points = as_data(data, model_case.datadim)
        estimator = RANSAC.from_config(self.config, rng=seed)

        logger.info(f"Fitting \"{model_case.name}\" to {len(points)} points "
                    f"({estimator.ntrials} trials, max_error={estimator.max_error})")

        self.metrics.start_timer("ransac")
        result = estimator.fit(points, model_case)
        processing_time = self.metrics.stop_timer("ransac")
        self.last_result = result

        precision = self.config["output"]["precision"]
        if result.found:
            status = "success"
            parameters = [round(float(p), precision) for p in result.model]
            inlier_indices = np.flatnonzero(result.mask).tolist()
            stats = FitMetrics.residual_statistics(points, result.model, result.mask,
                                                   model_case.evaluate)
        else:
            status = "no_model"
            parameters = None
            inlier_indices = []
            stats = None

        return {
            "system": "consensus",
            "version": self.version,
            "timestamp": datetime.now().isoformat(),
            "model_case": model_case.name,
            "status": status,
            "ninliers": result.ninliers,
            "parameters": parameters,
            "inlier_indices": inlier_indices,

            "quality": {
                "inlier_ratio": round(FitMetrics.inlier_ratio(result.ninliers, len(points)), 4),
                "residuals": stats
            },

            "processing_metadata": {
                "processing_time_ms": round(processing_time, 2),
                "npoints": len(points),
                "ntrials": result.ntrials,
                "naccepted": result.naccepted,
                "seed": seed
            }
        }
