"""
consensus - generic RANSAC engine

Fits models to data contaminated by outliers with pluggable
evaluate / generate / accept functions.
"""

__version__ = '1.0.0'

from .engine import (RANSAC, RansacResult, ransac, ransac_trial, random_indices,
                     ConsensusError, SamplingError, NegativeErrorValue, ModelShapeError)
from .models import ModelCapabilities, get_model_case

__all__ = [
    'RANSAC',
    'RansacResult',
    'ransac',
    'ransac_trial',
    'random_indices',
    'ConsensusError',
    'SamplingError',
    'NegativeErrorValue',
    'ModelShapeError',
    'ModelCapabilities',
    'get_model_case',
]
