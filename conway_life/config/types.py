"""Configuration dataclasses and the run result container."""

from __future__ import annotations

from dataclasses import dataclass

from conway_life.config.constants import (
    DELAY_SECONDS,
    GRID_SIZE,
    NUM_GENERATIONS,
    SHORT_PERIOD_HISTORY_SIZE,
)

__all__ = [
    "GridConfig",
    "RunConfig",
    "SimulationResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulation run."""

    generations: int
    survived: bool
    terminated_at: int | None
    termination_reason: str | None
    population_history: tuple[int, ...]


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GridConfig:
    """Grid construction parameters."""

    size: int = GRID_SIZE
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("size must be >= 1")


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for a caller-driven simulation loop.

    ``generations=None`` runs until the grid goes extinct (or an enabled
    detector fires). ``halt_window`` and ``short_period_max_period`` are
    disabled when ``None``.
    """

    size: int = GRID_SIZE
    generations: int | None = NUM_GENERATIONS
    delay_seconds: float = 0.0
    seed: int | None = None
    halt_window: int | None = None
    short_period_max_period: int | None = None
    short_period_history_size: int = SHORT_PERIOD_HISTORY_SIZE

    def __post_init__(self) -> None:
        GridConfig(size=self.size, seed=self.seed)
        if self.generations is not None and self.generations < 0:
            raise ValueError("generations must be >= 0")
        if self.delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0.0")
        if self.halt_window is not None and self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
        if self.short_period_max_period is not None:
            if self.short_period_max_period < 2:
                raise ValueError("short_period_max_period must be >= 2")
            if self.short_period_history_size < self.short_period_max_period * 2:
                raise ValueError(
                    "short_period_history_size must be >= 2 * short_period_max_period"
                )
        if self.short_period_history_size < 1:
            raise ValueError("short_period_history_size must be >= 1")

    @classmethod
    def until_extinct(
        cls, size: int = GRID_SIZE, delay_seconds: float = DELAY_SECONDS
    ) -> RunConfig:
        """Config for an unbounded, paced run that stops only on extinction."""
        return cls(size=size, generations=None, delay_seconds=delay_seconds)

    def grid_config(self) -> GridConfig:
        return GridConfig(size=self.size, seed=self.seed)
