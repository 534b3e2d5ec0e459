"""Gaussian elimination over ``Z/nZ``.

Both entry points drive a private copy of the input towards row-echelon form
using only the two in-place row primitives of ``ResidueMatrix``:

* ``gauss`` returns the reduced matrix.
* ``gauss_with_steps`` additionally records a human-readable trace of every
  row swap and row addition, each followed by the full matrix rendering.

Pivots sit on the diagonal. When the diagonal entry is zero the first row
below it with a nonzero entry in that column is swapped up; when there is no
such row the elimination stops and the partially reduced matrix is returned.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .matrix import ResidueMatrix

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationResult:
    """Trace text and reduced matrix produced by ``gauss_with_steps``."""

    steps: str
    matrix: ResidueMatrix
    step_count: int = 0


def _eliminate(A: ResidueMatrix, trace: Optional[List[str]]) -> Tuple[ResidueMatrix, int]:
    """Reduce a copy of ``A``; append trace blocks to ``trace`` when given.

    Returns:
        The reduced matrix and the number of swaps plus row additions.

    Raises:
        NoSolutionError: If an entry below a pivot cannot be cancelled, which
            only happens for composite moduli with a non-unit pivot.
    """
    T = A.copy()
    ring = T.ring
    n_rows, n_cols = T.shape
    sep = os.linesep

    column = 0
    offset = 0  # columns skipped for lack of a pivot
    performed = 0

    while column + offset < n_rows and column < n_cols:
        pivot_col = column + offset

        if ring.is_zero(T.data[column][pivot_col].value):
            line = next(
                (r for r in range(column, n_rows)
                 if not ring.is_zero(T.data[r][pivot_col].value)),
                None,
            )
            if line is None:
                LOG.debug("No pivot in column %d, stopping", pivot_col)
                if trace is not None:
                    trace.append("Didn't find a pivot" + sep)
                offset += 1
                break

            T.swap_rows(line, column)
            performed += 1
            LOG.debug("Swapped rows %d and %d", column, line)
            if trace is not None:
                trace.append(f"Swapping lines {column} and {line}:" + sep + str(T))

        pivot = T.data[column][pivot_col].value
        for line in range(column + 1, n_rows):
            k = ring.eliminating_factor(T.data[line][pivot_col].value, pivot)
            T.add_scaled_row(column, line, ring.element(k))
            performed += 1
            LOG.debug("Added %d times row %d to row %d", k, column, line)
            if trace is not None:
                trace.append(
                    f"Adding {k} times line {column} to line {line}" + sep + str(T) + sep
                )

        column += 1

    LOG.info(
        "Eliminated %dx%d matrix over Z/%d: %d pivots, %d row operations",
        n_rows, n_cols, ring.N, column, performed,
    )
    return T, performed


def gauss(A: ResidueMatrix) -> ResidueMatrix:
    """Row-echelon form of ``A``; ``A`` itself is left unchanged."""
    T, _ = _eliminate(A, None)
    return T


def gauss_with_steps(A: ResidueMatrix) -> EliminationResult:
    """Row-echelon form of ``A`` together with the trace of every step."""
    trace: List[str] = []
    T, performed = _eliminate(A, trace)
    return EliminationResult("".join(trace), T, performed)
