"""Fixed-length vectors over ``Z/NZ``."""

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import ConstructionError, DomainMismatchError
from .scalar import ResidueScalar


class ResidueVector:
    """An ordered, fixed-length sequence of scalars sharing one modulus.

    Vectors never change after construction; sums, scalings and cross
    products allocate a new vector.
    """

    __slots__ = ("_entries",)

    def __init__(self, scalars: Iterable[ResidueScalar]):
        entries: Tuple[ResidueScalar, ...] = tuple(scalars)
        if not entries:
            raise ConstructionError("A vector needs at least one entry")
        modulus = entries[0].modulus
        for s in entries:
            if s.modulus != modulus:
                raise DomainMismatchError(
                    f"Vector entries mix Z/{modulus} and Z/{s.modulus}"
                )
        self._entries = entries

    @classmethod
    def from_values(cls, modulus: int, values: Iterable[int]) -> "ResidueVector":
        return cls(ResidueScalar(v, modulus) for v in values)

    @property
    def modulus(self) -> int:
        return self._entries[0].modulus

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResidueScalar]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> ResidueScalar:
        return self._entries[i]

    def value(self, i: int) -> int:
        return self._entries[i].value

    def to_list(self) -> List[int]:
        return [s.value for s in self._entries]

    def _check_same_length(self, other: "ResidueVector", op: str) -> None:
        if len(self) != len(other):
            raise DomainMismatchError(
                f"Cannot {op} vectors of length {len(self)} and {len(other)}"
            )

    def add(self, other: "ResidueVector") -> "ResidueVector":
        self._check_same_length(other, "add")
        return ResidueVector(a + b for a, b in zip(self._entries, other._entries))

    def scale(self, factor: ResidueScalar) -> "ResidueVector":
        return ResidueVector(s * factor for s in self._entries)

    def cross_multiply(self, other: "ResidueVector") -> "ResidueVector":
        """Cross product generalized to any length.

        Both vectors are rotated left by one position, then entry ``i`` is
        ``u[i] * v[i+1] - u[i+1] * v[i]`` with the index wrapping to 0 after
        the last slot. For length 3 this is the usual cross product.
        """
        self._check_same_length(other, "cross-multiply")
        u = self._entries[1:] + self._entries[:1]
        v = other._entries[1:] + other._entries[:1]
        n = len(u)
        return ResidueVector(
            u[i] * v[(i + 1) % n] - u[(i + 1) % n] * v[i]
            for i in range(n)
        )

    def __add__(self, other):
        if not isinstance(other, ResidueVector):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: Union[ResidueScalar, "ResidueVector"]) -> "ResidueVector":
        if isinstance(other, ResidueVector):
            return self.cross_multiply(other)
        if isinstance(other, ResidueScalar):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: ResidueScalar) -> "ResidueVector":
        if isinstance(other, ResidueScalar):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, ResidueVector):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return f"ResidueVector(modulus={self.modulus}, values={self.to_list()})"

    def __str__(self):
        # Opens with "{" and closes with "]".
        return "{" + ";".join(str(s) for s in self._entries) + "]"


def dot(row: Sequence[ResidueScalar], vector: ResidueVector) -> ResidueScalar:
    """Sum of ``row[i] * vector[i]``; lengths are checked by the caller."""
    total = ResidueScalar(0, vector.modulus)
    for a, b in zip(row, vector):
        total = total + a * b
    return total
