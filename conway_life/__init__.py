"""Conway's Game of Life on a fixed-size square grid."""

from conway_life.config.types import GridConfig, RunConfig, SimulationResult
from conway_life.domain.cell import Cell
from conway_life.domain.grid import Grid
from conway_life.simulation.engine import run_simulation

__all__ = [
    "Cell",
    "Grid",
    "GridConfig",
    "RunConfig",
    "SimulationResult",
    "run_simulation",
]
