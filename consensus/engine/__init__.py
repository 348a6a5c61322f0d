"""Generic random sample consensus engine."""

from .errors import ConsensusError, SamplingError, NegativeErrorValue, ModelShapeError
from .sampler import Sampler, random_indices
from .trial import ransac_trial
from .ransac import RANSAC, RansacResult, ransac

__all__ = [
    'ConsensusError',
    'SamplingError',
    'NegativeErrorValue',
    'ModelShapeError',
    'Sampler',
    'random_indices',
    'ransac_trial',
    'RANSAC',
    'RansacResult',
    'ransac',
]
