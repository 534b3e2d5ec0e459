import os
import random
from itertools import product

import numpy as np

from residuematrix.matrix import ResidueMatrix


def pivots_cleared(T: ResidueMatrix) -> bool:
    """
    Check the shape left behind by elimination:
    - walk the diagonal while its entries are non-zero (these are the pivots);
    - every entry below such a pivot must be zero;
    - at the first zero diagonal entry, the rest of that column must be zero
      too, since elimination only stops where no pivot exists.
    """
    ring = T.ring
    nrows, ncols = T.shape
    for c in range(min(nrows, ncols)):
        below = [T.value(r, c) for r in range(c + 1, nrows)]
        if ring.is_zero(T.value(c, c)):
            return all(ring.is_zero(x) for x in below)
        if any(not ring.is_zero(x) for x in below):
            return False
    return True


def row_span(M: ResidueMatrix) -> set[tuple[int, ...]]:
    """
    Compute the full row span of M over Z/NZ by brute force.
    Only for small matrices (e.g., r <= 3) in tests.
    """
    N = M.modulus
    r, c = M.shape
    rows = M.to_numpy()

    span = set()
    for coeffs in product(range(N), repeat=r):
        vec = np.zeros(c, dtype=int)
        for i, alpha in enumerate(coeffs):
            if alpha == 0:
                continue
            vec = (vec + (alpha * rows[i])) % N
        span.add(tuple(int(x % N) for x in vec))
    return span


def render(*rows: str) -> str:
    """Join pre-rendered row strings the way ``ResidueMatrix.__str__`` does."""
    return "".join(row + os.linesep for row in rows)


def count_steps(trace: str) -> int:
    """Number of swap and row-addition blocks in an elimination trace."""
    return sum(
        1 for line in trace.split(os.linesep)
        if line.startswith("Swapping lines") or line.startswith("Adding ")
    )


def make_random_matrix(
    modulus: int,
    nrows: int,
    ncols: int,
) -> ResidueMatrix:
    """Generate a random matrix over Z/modulus."""
    data = [
        [random.randint(0, modulus - 1) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return ResidueMatrix.from_rows(modulus, data)
