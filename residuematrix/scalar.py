"""Immutable elements of the residue-class ring ``Z/NZ``."""

import operator
from dataclasses import dataclass
from functools import total_ordering

from .errors import ConstructionError, DomainMismatchError
from .ring import RingZModN


@total_ordering
@dataclass(frozen=True, eq=False)
class ResidueScalar:
    """A value in ``[0, modulus)`` paired with its modulus.

    Every arithmetic operation returns a new scalar normalized back into
    ``[0, modulus)``. Operands must share the same modulus.
    """

    value: int
    modulus: int

    def __post_init__(self):
        for field in ("value", "modulus"):
            raw = getattr(self, field)
            try:
                object.__setattr__(self, field, operator.index(raw))
            except TypeError:
                raise ConstructionError(
                    f"{field.capitalize()} must be an integer, got {raw!r}"
                ) from None
        if self.modulus <= 0:
            raise ConstructionError(f"Modulus must be positive, got {self.modulus}")
        if not 0 <= self.value < self.modulus:
            raise ConstructionError(
                f"Value {self.value} outside [0, {self.modulus})"
            )

    @property
    def ring(self) -> RingZModN:
        return RingZModN(self.modulus)

    def _check(self, other: "ResidueScalar", op: str) -> None:
        if not isinstance(other, ResidueScalar):
            raise TypeError(f"Cannot {op} ResidueScalar and {type(other).__name__}")
        if other.modulus != self.modulus:
            raise DomainMismatchError(
                f"Cannot {op} Z/{self.modulus} and Z/{other.modulus}"
            )

    def add(self, other: "ResidueScalar") -> "ResidueScalar":
        self._check(other, "add")
        return ResidueScalar(self.ring.add(self.value, other.value), self.modulus)

    def subtract(self, other: "ResidueScalar") -> "ResidueScalar":
        self._check(other, "subtract")
        return ResidueScalar(self.ring.sub(self.value, other.value), self.modulus)

    def multiply(self, other: "ResidueScalar") -> "ResidueScalar":
        self._check(other, "multiply")
        return ResidueScalar(self.ring.mul(self.value, other.value), self.modulus)

    def inverse(self) -> "ResidueScalar":
        return ResidueScalar(self.ring.inverse(self.value), self.modulus)

    def divide(self, other: "ResidueScalar") -> "ResidueScalar":
        """Multiply by the multiplicative inverse of ``other``.

        Raises:
            InvertibilityError: If ``gcd(other.value, modulus) != 1``.
        """
        self._check(other, "divide")
        ring = self.ring
        return ResidueScalar(ring.mul(self.value, ring.inverse(other.value)), self.modulus)

    def __add__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ResidueScalar":
        return ResidueScalar(self.ring.neg(self.value), self.modulus)

    def __eq__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        return self.value == other.value and self.modulus == other.modulus

    def __lt__(self, other):
        if not isinstance(other, ResidueScalar):
            return NotImplemented
        self._check(other, "compare")
        return self.value < other.value

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __float__(self):
        return float(self.value)

    def __str__(self):
        return str(self.value)
