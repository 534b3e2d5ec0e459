from dataclasses import dataclass
from math import gcd
from typing import Tuple

from .errors import ConstructionError, InvertibilityError, NoSolutionError


@dataclass(frozen=True)
class RingZModN:
    N: int

    def __post_init__(self):
        if self.N <= 0:
            raise ConstructionError(f"Modulus must be positive, got {self.N}")

    def add(self, a, b):
        return (a + b) % self.N

    def sub(self, a, b):
        return (a - b) % self.N

    def mul(self, a, b):
        return (a * b) % self.N

    def neg(self, a):
        return (-a) % self.N

    def is_zero(self, a) -> bool:
        return a % self.N == 0

    def gcd(self, a, b):
        return gcd(a, b)

    def element(self, value: int):
        from .scalar import ResidueScalar
        return ResidueScalar(value, self.N)

    def gcdex_primitive(self, a, b) -> Tuple[int, int, int]:
        """
        Computes extended GCD over integers.
        Returns (g, s, t) such that s*a + t*b = g
        """
        r0, r1 = a, b
        s0, s1 = 1, 0
        t0, t1 = 0, 1

        while r1 != 0:
            q = r0 // r1
            r0, r1 = r1, r0 - q * r1
            s0, s1 = s1, s0 - q * s1
            t0, t1 = t1, t0 - q * t1

        return r0, s0, t0

    def inverse(self, b) -> int:
        """
        Smallest positive k < N with k * b = 1 (mod N).

        Raises InvertibilityError when gcd(b, N) != 1, which includes b = 0.
        In Z/1 every value is 0 and nothing is invertible.
        """
        b_int = b % self.N
        if self.N == 1 or self.gcd(b_int, self.N) != 1:
            raise InvertibilityError(
                f"{b_int} has no multiplicative inverse modulo {self.N}"
            )
        _, s, _ = self.gcdex_primitive(b_int, self.N)
        return s % self.N

    def div(self, a, b) -> int:
        """
        Exact division: the smallest x >= 0 with b * x = a (mod N).

        A solution exists iff gcd(b, N) divides a. The solutions then form
        one class modulo N / gcd(b, N); its least representative is returned,
        which is the value a linear search from 0 would stop at.
        """
        a_int = a % self.N
        b_int = b % self.N
        g = self.gcd(b_int, self.N)
        if a_int % g != 0:
            raise NoSolutionError(
                f"Exact division {a_int}/{b_int} impossible in Z/{self.N}"
            )
        step = self.N // g
        if step == 1:
            return 0
        _, s, _ = self.gcdex_primitive(b_int // g, step)
        return ((a_int // g) * s) % step

    def eliminating_factor(self, target, pivot) -> int:
        """Smallest k >= 0 such that k * pivot + target = 0 (mod N)."""
        try:
            return self.div(self.neg(target), pivot)
        except NoSolutionError:
            raise NoSolutionError(
                f"No multiple of pivot {pivot % self.N} cancels {target % self.N} "
                f"modulo {self.N}"
            ) from None
