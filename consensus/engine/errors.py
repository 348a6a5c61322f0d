"""Exceptions raised by the consensus engine."""


class ConsensusError(Exception):
    """Base class for fatal engine errors."""


class SamplingError(ConsensusError):
    """Could not draw a sample of distinct indices."""
    
    def __init__(self, nfit: int, npoints: int, attempts: int):
        self.nfit = nfit
        self.npoints = npoints
        self.attempts = attempts
        super().__init__(
            f"could not draw {nfit} distinct indices out of {npoints} "
            f"data points after {attempts} attempts"
        )


class NegativeErrorValue(ConsensusError, ValueError):
    """The evaluation function returned an invalid error."""
    
    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(
            f"evaluation function returned error {value!r} for data point {index}; "
            f"errors must be non-negative"
        )


class ModelShapeError(ConsensusError, ValueError):
    """The generating function returned the wrong number of parameters."""
    
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            f"generating function returned {got} model parameters, expected {expected}"
        )
