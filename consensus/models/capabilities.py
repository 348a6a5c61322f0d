"""Capability set describing a model family to the engine."""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class ModelCapabilities:
    """
    The three functions the engine needs from a model family.

    Attributes:
        name: Identifier of the model family
        datadim: Dimension of each data point
        modeldim: Number of model parameters
        nfit: Number of data points needed to generate a model
        evaluate: (model, point) -> non-negative error
        generate: (nfit x datadim sample) -> model parameters, or None to skip the sample
        accept: Optional (model) -> bool, rejects degenerate models
    """
    name: str
    datadim: int
    modeldim: int
    nfit: int
    evaluate: Callable[[np.ndarray, np.ndarray], float]
    generate: Callable[[np.ndarray], np.ndarray]
    accept: Optional[Callable[[np.ndarray], bool]] = None
