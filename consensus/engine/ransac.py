"""RANSAC implementation for robust estimation."""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from consensus.engine.errors import ModelShapeError
from consensus.engine.sampler import MAX_ATTEMPTS, RandomSource, Sampler, as_generator
from consensus.engine.trial import ErrorFunction, ransac_trial

logger = logging.getLogger(__name__)

GeneratingFunction = Callable[[np.ndarray], np.ndarray]
AcceptingFunction = Callable[[np.ndarray], bool]


@dataclass
class RansacResult:
    """Outcome of a consensus search."""
    ninliers: int
    model: Optional[np.ndarray]
    mask: Optional[np.ndarray]
    ntrials: int = 0
    naccepted: int = 0

    @property
    def found(self) -> bool:
        """Whether a model explaining enough of the data was found."""
        return self.model is not None


def as_data(data, datadim: int) -> np.ndarray:
    """
    Convert data to a read-only (N, datadim) float array.

    Accepts an (N, datadim) array or a flat buffer of N * datadim values.
    """
    if datadim < 1:
        raise ValueError(f"datadim must be at least 1, got {datadim}")
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim > 2 or (arr.ndim == 2 and arr.shape[1] != datadim):
        raise ValueError(f"data of shape {arr.shape} does not hold points of dimension {datadim}")
    if arr.size % datadim != 0:
        raise ValueError(f"{arr.size} values do not split into points of dimension {datadim}")
    view = arr.reshape(-1, datadim).view()
    view.flags.writeable = False
    return view


def ransac(data, datadim: int, modeldim: int,
           evaluate: ErrorFunction, generate: GeneratingFunction, nfit: int,
           ntrials: int, min_inliers: int, max_error: float,
           accept: Optional[AcceptingFunction] = None,
           rng: RandomSource = None,
           max_attempts: int = MAX_ATTEMPTS) -> RansacResult:
    """
    Find the model with the largest number of inliers.

    Runs exactly ``ntrials`` trials. Each trial fits a candidate model to a
    random minimal sample of ``nfit`` points, drops it if the generator
    returns None or ``accept`` rejects it, and otherwise counts its inliers
    over the whole data set. The first candidate reaching the highest count
    is kept.

    Args:
        data: (N, datadim) array, or flat buffer of N * datadim values
        datadim: Dimension of each data point
        modeldim: Number of model parameters
        evaluate: Function (model, point) -> non-negative error
        generate: Function (nfit x datadim sample) -> model parameters,
            or None for a degenerate sample
        nfit: Number of data points needed to generate a model
        ntrials: Number of models to try
        min_inliers: Minimum number of inliers of an acceptable result
        max_error: Maximum error of an inlier
        accept: Optional predicate rejecting degenerate models
        rng: numpy Generator, seed, or None
        max_attempts: Sampling attempts per trial before giving up

    Returns:
        RansacResult; ``found`` is False when no model has enough inliers

    Raises:
        SamplingError: If a sample of distinct indices cannot be drawn
        NegativeErrorValue: If ``evaluate`` returns a negative error
        ModelShapeError: If ``generate`` returns the wrong number of parameters
    """
    if modeldim < 1:
        raise ValueError(f"modeldim must be at least 1, got {modeldim}")
    if nfit < 1:
        raise ValueError(f"nfit must be at least 1, got {nfit}")
    if ntrials < 1:
        raise ValueError(f"ntrials must be positive, got {ntrials}")
    if min_inliers < 0:
        raise ValueError(f"min_inliers must be non-negative, got {min_inliers}")
    if not max_error > 0:
        raise ValueError(f"max_error must be positive, got {max_error}")

    points = as_data(data, datadim)
    n = len(points)
    sampler = Sampler(n, nfit, rng=rng, max_attempts=max_attempts)

    best_ninliers = 0
    best_model = np.empty(modeldim, dtype=np.float64)
    best_mask = np.zeros(n, dtype=bool)
    tmp_mask = np.empty(n, dtype=bool)
    sample = np.empty((nfit, datadim), dtype=np.float64)
    naccepted = 0

    for trial in range(ntrials):
        indices = sampler.draw()
        np.take(points, indices, axis=0, out=sample)

        model = generate(sample)
        if model is None:
            continue
        model = np.asarray(model, dtype=np.float64).ravel()
        if model.size != modeldim:
            raise ModelShapeError(modeldim, model.size)
        if accept is not None and not accept(model):
            continue
        naccepted += 1

        _, n_inliers = ransac_trial(points, model, max_error, evaluate, out=tmp_mask)

        if n_inliers > best_ninliers:
            logger.debug(f"Trial {trial}: {n_inliers} inliers (previous best {best_ninliers})")
            best_ninliers = n_inliers
            best_model[:] = model
            best_mask[:] = tmp_mask

    logger.info(
        f"RANSAC: {ntrials} trials, {naccepted} accepted, "
        f"best model has {best_ninliers}/{n} inliers (min_inliers={min_inliers})"
    )

    if best_ninliers > 0 and best_ninliers >= min_inliers:
        return RansacResult(best_ninliers, best_model, best_mask,
                            ntrials=ntrials, naccepted=naccepted)
    return RansacResult(0, None, None, ntrials=ntrials, naccepted=naccepted)


class RANSAC:
    """RANSAC algorithm for outlier rejection."""

    def __init__(self, max_error: float = 1.0, ntrials: int = 1000,
                 min_inliers: int = 0, rng: RandomSource = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.max_error = max_error
        self.ntrials = ntrials
        self.min_inliers = min_inliers
        self.max_attempts = max_attempts
        self.rng = as_generator(rng)

    @classmethod
    def from_config(cls, config: Dict[str, Any],
                    rng: RandomSource = None) -> "RANSAC":
        """Build from the ``ransac`` section of a configuration dictionary."""
        section = config.get("ransac", config)
        if rng is None:
            rng = section.get("seed")
        return cls(max_error=section["max_error"],
                   ntrials=section["ntrials"],
                   min_inliers=section["min_inliers"],
                   rng=rng,
                   max_attempts=section.get("max_attempts", MAX_ATTEMPTS))

    def fit(self, data, capabilities) -> RansacResult:
        """Fit the model described by ``capabilities`` to the data."""
        return ransac(data, capabilities.datadim, capabilities.modeldim,
                      capabilities.evaluate, capabilities.generate, capabilities.nfit,
                      self.ntrials, self.min_inliers, self.max_error,
                      accept=capabilities.accept, rng=self.rng,
                      max_attempts=self.max_attempts)

    def score(self, data, model, capabilities):
        """Inlier mask and count of a given model."""
        points = as_data(data, capabilities.datadim)
        model = np.asarray(model, dtype=np.float64).ravel()
        return ransac_trial(points, model, self.max_error, capabilities.evaluate)
