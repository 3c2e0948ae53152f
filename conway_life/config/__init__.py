"""Configuration layer: constants and typed config dataclasses."""

from conway_life.config.constants import (
    ALIVE_GLYPH,
    BIRTH_NEIGHBORS,
    DEAD_GLYPH,
    DELAY_SECONDS,
    GRID_SIZE,
    LIVE_SEED_VALUES,
    NUM_GENERATIONS,
    SEED_MAX,
    SEED_MIN,
    STASIS_NEIGHBORS,
)
from conway_life.config.types import GridConfig, RunConfig, SimulationResult

__all__ = [
    "ALIVE_GLYPH",
    "BIRTH_NEIGHBORS",
    "DEAD_GLYPH",
    "DELAY_SECONDS",
    "GRID_SIZE",
    "GridConfig",
    "LIVE_SEED_VALUES",
    "NUM_GENERATIONS",
    "RunConfig",
    "SEED_MAX",
    "SEED_MIN",
    "STASIS_NEIGHBORS",
    "SimulationResult",
]
