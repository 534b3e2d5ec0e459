import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import config
from .errors import ConstructionError, DomainMismatchError
from .ring import RingZModN
from .scalar import ResidueScalar
from .vector import ResidueVector, dot

LOG = logging.getLogger(__name__)


@dataclass
class ResidueMatrix:
    ring: RingZModN
    data: List[List[ResidueScalar]]

    def __post_init__(self):
        if not self.data:
            raise ConstructionError("A matrix needs at least one row")
        ncols = len(self.data[0])
        if ncols == 0:
            raise ConstructionError("A matrix needs at least one column")
        N = self.ring.N
        for row in self.data:
            if len(row) != ncols:
                raise ConstructionError("All rows must have the same length")
            for s in row:
                if s.modulus != N:
                    raise DomainMismatchError(
                        f"Entry {s.value} of Z/{s.modulus} in a matrix over Z/{N}"
                    )
        # Own the row lists so callers cannot alias them.
        self.data = [list(row) for row in self.data]

    @property
    def nrows(self) -> int:
        return len(self.data)

    @property
    def ncols(self) -> int:
        return len(self.data[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    @property
    def modulus(self) -> int:
        return self.ring.N

    @classmethod
    def from_scalars(cls, width: int, scalars: Sequence[ResidueScalar]) -> "ResidueMatrix":
        """Fill a matrix row by row from ``scalars``.

        Raises:
            ConstructionError: If ``width`` is not positive or the number of
                scalars is not a positive multiple of ``width``.
        """
        scalars = list(scalars)
        if width <= 0:
            raise ConstructionError(f"Width must be positive, got {width}")
        if not scalars or len(scalars) % width != 0:
            raise ConstructionError(
                f"{len(scalars)} values cannot fill rows of width {width}"
            )
        ring = RingZModN(scalars[0].modulus)
        rows = [scalars[i:i + width] for i in range(0, len(scalars), width)]
        return cls(ring, rows)

    @classmethod
    def from_values(cls, width: int, modulus: int, values: Iterable[int]) -> "ResidueMatrix":
        ring = RingZModN(modulus)
        return cls.from_scalars(width, [ring.element(v) for v in values])

    @classmethod
    def from_rows(cls, modulus: int, rows: List[List[int]]) -> "ResidueMatrix":
        ring = RingZModN(modulus)
        return cls(ring, [[ring.element(v) for v in row] for row in rows])

    @classmethod
    def identity(cls, modulus: int, n: int) -> "ResidueMatrix":
        rows = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
        if modulus == 1:
            rows = [[0] * n for _ in range(n)]
        return cls.from_rows(modulus, rows)

    @classmethod
    def parse(cls, text: str, modulus: int) -> "ResidueMatrix":
        """Rebuild a matrix from its ``str()`` rendering.

        Each non-blank line must read ``[v0;v1;...]``.
        """
        rows = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            if not (line.startswith("[") and line.endswith("]")):
                raise ConstructionError(f"Line {lineno} is not a matrix row: {line!r}")
            try:
                rows.append([int(v) for v in line[1:-1].split(";")])
            except ValueError:
                raise ConstructionError(
                    f"Line {lineno} holds a non-integer entry: {line!r}"
                ) from None
        return cls.from_rows(modulus, rows)

    def __getitem__(self, key: Tuple[int, int]) -> ResidueScalar:
        r, c = key
        return self.data[r][c]

    def value(self, r: int, c: int) -> int:
        return self.data[r][c].value

    def row(self, i: int) -> ResidueVector:
        return ResidueVector(self.data[i])

    def to_lists(self) -> List[List[int]]:
        return [[s.value for s in row] for row in self.data]

    def copy(self) -> "ResidueMatrix":
        return ResidueMatrix(self.ring, [row[:] for row in self.data])

    def swap_rows(self, i: int, j: int) -> None:
        """In-place: exchange rows ``i`` and ``j``."""
        if i == j or not (0 <= i < self.nrows and 0 <= j < self.nrows):
            raise DomainMismatchError(
                f"Invalid rows {i} and {j} for a matrix with {self.nrows} rows"
            )
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def add_scaled_row(self, source: int, target: int, factor: ResidueScalar) -> None:
        """In-place: ``row_target <- row_target + factor * row_source``."""
        src = self.data[source]
        self.data[target] = [t + s * factor for t, s in zip(self.data[target], src)]

    def multiply(
        self,
        other: Union[ResidueVector, "ResidueMatrix"],
        max_workers: Optional[int] = None,
    ) -> Union[ResidueVector, "ResidueMatrix"]:
        if isinstance(other, ResidueVector):
            return self._multiply_vector(other)
        if isinstance(other, ResidueMatrix):
            return self._multiply_matrix(other, max_workers)
        raise TypeError(f"Cannot multiply ResidueMatrix by {type(other).__name__}")

    def __matmul__(self, other):
        if not isinstance(other, (ResidueVector, ResidueMatrix)):
            return NotImplemented
        return self.multiply(other)

    def _multiply_vector(self, vector: ResidueVector) -> ResidueVector:
        if vector.modulus != self.modulus:
            raise DomainMismatchError(
                f"Cannot multiply Z/{self.modulus} matrix by Z/{vector.modulus} vector"
            )
        if len(vector) != self.ncols:
            raise DomainMismatchError(
                f"Dimension mismatch: {self.ncols} columns, vector of length {len(vector)}"
            )
        return ResidueVector(dot(row, vector) for row in self.data)

    def _multiply_matrix(self, other: "ResidueMatrix", max_workers: Optional[int]) -> "ResidueMatrix":
        if self.ring != other.ring:
            raise DomainMismatchError(
                f"Cannot multiply matrices over Z/{self.modulus} and Z/{other.modulus}"
            )

        rA, cA = self.shape
        rB, cB = other.shape
        if cA != rB:
            raise DomainMismatchError(f"Dimension mismatch: {cA} != {rB}")

        N = self.ring.N
        A = self.to_lists()
        B = other.to_lists()

        # Output cells are independent; split the longer axis across workers.
        by_rows = rA >= cB
        span = rA if by_rows else cB

        def cell(i: int, j: int) -> int:
            Ai = A[i]
            return sum(Ai[k] * B[k][j] for k in range(cA)) % N

        def block(lo: int, hi: int) -> List[List[int]]:
            if by_rows:
                return [[cell(i, j) for j in range(cB)] for i in range(lo, hi)]
            return [[cell(i, j) for i in range(rA)] for j in range(lo, hi)]

        W = config.max_workers() if max_workers is None else max_workers
        if W < 0:
            raise ValueError(f"max_workers must be >= 0, got {W}")
        W = min(W, span)

        if W == 0:
            blocks = [block(0, span)]
        else:
            LOG.debug(
                "Multiplying %dx%d by %dx%d over Z/%d with %d workers by %s",
                rA, cA, rB, cB, N, W, "rows" if by_rows else "columns",
            )
            with ThreadPoolExecutor(max_workers=W) as executor:
                tasks = {executor.submit(block, i*span//W, (i+1)*span//W): i
                         for i in range(W)}
            blocks = [None] * W
            for task in as_completed(tasks):
                blocks[tasks[task]] = task.result()

        lines = [line for b in blocks for line in b]
        C = lines if by_rows else [list(col) for col in zip(*lines)]
        return ResidueMatrix.from_rows(N, C)

    def gauss(self) -> "ResidueMatrix":
        from .echelon import gauss
        return gauss(self)

    def gauss_with_steps(self):
        from .echelon import gauss_with_steps
        return gauss_with_steps(self)

    def __str__(self):
        return "".join(
            "[" + ";".join(str(s) for s in row) + "]" + os.linesep
            for row in self.data
        )

    def to_numpy(self) -> np.ndarray:
        # Values above int64 range fall back to Python ints.
        dtype = np.int64 if self.ring.N <= np.iinfo(np.int64).max else object
        return np.array(self.to_lists(), dtype=dtype)

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.to_lists())

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
