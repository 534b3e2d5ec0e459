"""Runtime configuration read from the environment."""

import os

MAXWORKERS_ENV = "RESIDUEMATRIX_MAXWORKERS"


def max_workers() -> int:
    """Worker threads used for matrix products; ``0`` computes inline."""
    raw = os.getenv(MAXWORKERS_ENV)
    if raw is None or raw.strip() == "":
        return 0
    try:
        workers = int(raw)
    except ValueError:
        raise ValueError(f"{MAXWORKERS_ENV} must be an integer, got {raw!r}") from None
    if workers < 0:
        raise ValueError(f"{MAXWORKERS_ENV} must be >= 0, got {workers}")
    return workers
