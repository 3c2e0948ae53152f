"""A single grid position and its survival rule.

Neighbor lookups always go through a snapshot grid, never through sibling
cells of the live grid, so a generation can be evaluated in any order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from conway_life.config.constants import (
    ALIVE_GLYPH,
    BIRTH_NEIGHBORS,
    DEAD_GLYPH,
    LIVE_SEED_VALUES,
    SEED_MAX,
    SEED_MIN,
    STASIS_NEIGHBORS,
)

if TYPE_CHECKING:
    from conway_life.domain.grid import Grid


@dataclass
class Cell:
    """One creature of the grid. ``x``/``y`` are identity and never change."""

    x: int
    y: int
    alive: bool = False

    @classmethod
    def from_seed(cls, x: int, y: int, seed_value: int) -> Cell:
        """Build a cell from a random draw in ``[SEED_MIN, SEED_MAX]``.

        Only the values in ``LIVE_SEED_VALUES`` (0 and 2) produce a live cell.
        """
        if not SEED_MIN <= seed_value <= SEED_MAX:
            raise ValueError(f"seed_value must be in [{SEED_MIN}, {SEED_MAX}]")
        return cls(x=x, y=y, alive=seed_value in LIVE_SEED_VALUES)

    def is_alive(self) -> bool:
        return self.alive

    def set_alive(self, value: bool) -> None:
        self.alive = value

    def count_live_neighbors(self, snapshot: Grid) -> int:
        """Count live Moore neighbors in ``snapshot``, clipped at the grid edges."""
        max_index = snapshot.size - 1
        count = 0
        for nx in range(max(self.x - 1, 0), min(self.x + 1, max_index) + 1):
            for ny in range(max(self.y - 1, 0), min(self.y + 1, max_index) + 1):
                if nx == self.x and ny == self.y:
                    continue
                if snapshot.cells[nx][ny].alive:
                    count += 1
        return count

    def evaluate_next_state(self, snapshot: Grid) -> None:
        """Apply B3/S23: 2 neighbors keep the current state, 3 give life, else death."""
        neighbors = self.count_live_neighbors(snapshot)
        if neighbors == STASIS_NEIGHBORS:
            return
        self.set_alive(neighbors == BIRTH_NEIGHBORS)

    def __str__(self) -> str:
        return ALIVE_GLYPH if self.alive else DEAD_GLYPH
