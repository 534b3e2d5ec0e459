from .echelon import EliminationResult, gauss, gauss_with_steps
from .errors import (
    ConstructionError,
    DomainMismatchError,
    InvertibilityError,
    NoSolutionError,
    ResidueError,
)
from .matrix import ResidueMatrix
from .ring import RingZModN
from .scalar import ResidueScalar
from .vector import ResidueVector

__all__ = [
    "ConstructionError",
    "DomainMismatchError",
    "EliminationResult",
    "InvertibilityError",
    "NoSolutionError",
    "ResidueError",
    "ResidueMatrix",
    "ResidueScalar",
    "ResidueVector",
    "RingZModN",
    "gauss",
    "gauss_with_steps",
]
