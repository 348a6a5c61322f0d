"""Model families usable with the consensus engine."""

from .capabilities import ModelCapabilities
from .line import LINE
from .affine import AFFINE, AFFINE_REASONABLE
from .fundamental import FUNDAMENTAL_MATRIX

MODEL_CASES = {
    case.name: case
    for case in (LINE, AFFINE, AFFINE_REASONABLE, FUNDAMENTAL_MATRIX)
}

# recognized, no implementation yet
PLANNED_CASES = ('hom',)


def get_model_case(name: str) -> ModelCapabilities:
    """Look up a model family by id."""
    if name in MODEL_CASES:
        return MODEL_CASES[name]
    if name in PLANNED_CASES:
        raise NotImplementedError(f"model \"{name}\" is not yet implemented")
    raise KeyError(f"unrecognized model \"{name}\" (available: {', '.join(MODEL_CASES)})")


__all__ = ['ModelCapabilities', 'MODEL_CASES', 'get_model_case',
           'LINE', 'AFFINE', 'AFFINE_REASONABLE', 'FUNDAMENTAL_MATRIX']
