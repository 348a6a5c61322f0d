"""Random selection of minimal samples."""

import logging
import numpy as np
from typing import Optional, Union

from consensus.engine.errors import SamplingError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10

RandomSource = Union[np.random.Generator, int, None]


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    """Return a numpy Generator from a Generator, a seed or None."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def are_different(indices: np.ndarray) -> bool:
    """
    Check whether all entries of an index vector are different.

    The vector is sorted in place.
    """
    indices.sort()
    return not np.any(indices[1:] == indices[:-1])


def random_indices(rng: np.random.Generator, nfit: int, npoints: int,
                   out: Optional[np.ndarray] = None,
                   max_attempts: int = MAX_ATTEMPTS) -> np.ndarray:
    """
    Draw `nfit` distinct indices uniformly from [0, npoints).

    The whole batch is redrawn when it contains a repeated index.

    Args:
        rng: Random source
        nfit: Number of indices to draw
        npoints: Size of the index range
        out: Optional preallocated integer buffer of length nfit
        max_attempts: Number of batches drawn before giving up

    Returns:
        Sorted array of distinct indices (``out`` when given)

    Raises:
        SamplingError: If no batch of distinct indices was drawn
    """
    if nfit < 1:
        raise ValueError(f"nfit must be at least 1, got {nfit}")
    if out is None:
        out = np.empty(nfit, dtype=np.intp)
    elif out.shape != (nfit,):
        raise ValueError(f"index buffer has shape {out.shape}, expected ({nfit},)")

    if npoints < 1:
        raise SamplingError(nfit, npoints, 0)

    for attempt in range(1, max_attempts + 1):
        out[:] = rng.integers(0, npoints, size=nfit)
        if are_different(out):
            return out
        logger.debug(f"Repeated index in sample (attempt {attempt}/{max_attempts})")

    raise SamplingError(nfit, npoints, max_attempts)


class Sampler:
    """Draws minimal samples over a fixed index range, reusing one buffer."""

    def __init__(self, npoints: int, nfit: int, rng: RandomSource = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.npoints = npoints
        self.nfit = nfit
        self.rng = as_generator(rng)
        self.max_attempts = max_attempts
        self._buffer = np.empty(nfit, dtype=np.intp)

    def draw(self) -> np.ndarray:
        """Draw one sample. The returned array is overwritten by the next draw."""
        return random_indices(self.rng, self.nfit, self.npoints,
                              out=self._buffer, max_attempts=self.max_attempts)
