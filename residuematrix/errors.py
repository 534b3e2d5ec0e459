"""Exception hierarchy for residue-class linear algebra."""


class ResidueError(Exception):
    """Base class for every error raised by ``residuematrix``."""


class ConstructionError(ResidueError, ValueError):
    """A scalar, vector or matrix could not be built from the given data."""


class DomainMismatchError(ResidueError, ValueError):
    """Operands live in different rings or have incompatible shapes."""


class InvertibilityError(ResidueError, ArithmeticError):
    """The divisor has no multiplicative inverse modulo N."""


class NoSolutionError(ResidueError, ArithmeticError):
    """A linear congruence ``b * x = a (mod N)`` has no solution."""
