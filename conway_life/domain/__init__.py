"""Domain layer: cells, the grid, and caller-side stop detectors."""

from conway_life.domain.cell import Cell
from conway_life.domain.filters import HaltDetector, ShortPeriodDetector, TerminationReason
from conway_life.domain.grid import Grid, GridStates

__all__ = [
    "Cell",
    "Grid",
    "GridStates",
    "HaltDetector",
    "ShortPeriodDetector",
    "TerminationReason",
]
