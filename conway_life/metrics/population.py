"""Population metrics over grids and per-generation population series."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from conway_life.domain.grid import Grid


def grid_to_array(grid: Grid) -> np.ndarray:
    """Return alive flags as a ``uint8`` array indexed ``[x, y]``."""
    return np.array(grid.states(), dtype=np.uint8)


def population(grid: Grid) -> int:
    return int(grid_to_array(grid).sum())


def density(grid: Grid) -> float:
    """Fraction of live cells in ``[0.0, 1.0]``."""
    return float(grid_to_array(grid).mean())


def summarize_population(history: Sequence[int]) -> dict[str, float | int]:
    """Summarize a population series (generation 0 first)."""
    if len(history) == 0:
        raise ValueError("history must not be empty")
    series = np.asarray(history, dtype=np.int64)
    return {
        "initial": int(series[0]),
        "final": int(series[-1]),
        "peak": int(series.max()),
        "minimum": int(series.min()),
        "mean": float(series.mean()),
    }
