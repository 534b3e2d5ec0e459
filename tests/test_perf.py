"""Performance sanity checks for elimination and matrix products.

These tests verify that runtime does not regress catastrophically.
They use generous wall-clock bounds and are marked ``perf`` so they
are excluded from the default test run.

Run with: pytest -m perf
"""

import random
import time

import numpy as np
import pytest

from residuematrix.echelon import gauss
from residuematrix.ring import RingZModN
from tests.helpers import make_random_matrix, pivots_cleared


@pytest.mark.perf
class TestPerformanceSanity:
    """Wall-clock sanity checks for representative sizes."""

    # Bounds are set generously to account for CI variability and slow
    # runners. Prime moduli keep every pivot invertible.
    CASES = [
        pytest.param(13, 20, 5.0, id="20x20-mod13"),
        pytest.param(101, 40, 15.0, id="40x40-mod101"),
        pytest.param(2 ** 31 - 1, 40, 15.0, id="40x40-mod2^31-1"),
    ]

    @pytest.mark.parametrize("N, size, max_seconds", CASES)
    def test_gauss_runtime_bound(
        self,
        N: int,
        size: int,
        max_seconds: float,
    ) -> None:
        random.seed(42)
        A = make_random_matrix(N, size, size)

        t0 = time.perf_counter()
        T = gauss(A)
        elapsed = time.perf_counter() - t0

        # Verify correctness so timing doesn't mask a bug
        assert pivots_cleared(T)

        assert elapsed < max_seconds, (
            f"{size}x{size} mod {N} took {elapsed:.2f}s "
            f"(limit {max_seconds:.1f}s)"
        )

    def test_large_modulus_factor_is_not_a_linear_search(self) -> None:
        """A linear search would need ~2^61 steps here."""
        ring = RingZModN(2 ** 61 - 1)
        t0 = time.perf_counter()
        k = ring.eliminating_factor(1, 2)
        elapsed = time.perf_counter() - t0
        assert (k * 2 + 1) % ring.N == 0
        assert elapsed < 1.0

    @pytest.mark.parametrize("workers", [0, 4])
    def test_product_runtime_bound(self, workers: int) -> None:
        random.seed(42)
        N = 1009
        A = make_random_matrix(N, 40, 30)
        B = make_random_matrix(N, 30, 40)

        t0 = time.perf_counter()
        C = A.multiply(B, max_workers=workers)
        elapsed = time.perf_counter() - t0

        assert np.array_equal(C.to_numpy(), (A.to_numpy() @ B.to_numpy()) % N)
        assert elapsed < 10.0, f"40x30 @ 30x40 took {elapsed:.2f}s"
