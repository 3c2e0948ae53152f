"""Simulation runner: the caller loop around ``Grid.advance``."""

from conway_life.simulation.engine import emit_grid, run_simulation

__all__ = [
    "emit_grid",
    "run_simulation",
]
