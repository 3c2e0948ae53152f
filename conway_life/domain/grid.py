"""Fixed-size square grid of cells with snapshot-based generation updates.

Lifecycle: ``create`` seeds the grid, ``advance`` moves it one generation
forward, and the first ``advance`` that leaves no live cell marks the grid
extinct. An extinct grid can still be rendered but not advanced.

The caller owns double-buffering: before each ``advance`` it passes an
independent deep copy of the grid (see ``snapshot``). Every cell reads its
neighborhood from that copy, so updates within one generation are
simultaneous regardless of iteration order.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from random import Random

from conway_life.config.constants import SEED_MAX, SEED_MIN
from conway_life.domain.cell import Cell

GridStates = tuple[tuple[bool, ...], ...]
"""Immutable ``[x][y]`` view of every cell's alive flag."""


def _validate_size(size: int) -> None:
    if size < 1:
        raise ValueError("size must be >= 1")


@dataclass
class Grid:
    """Square ``size x size`` collection of cells indexed ``cells[x][y]``."""

    size: int
    cells: list[list[Cell]]
    _extinct: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate_size(self.size)
        if len(self.cells) != self.size:
            raise ValueError("cells must have exactly size rows")
        for x, row in enumerate(self.cells):
            if len(row) != self.size:
                raise ValueError("cells must have exactly size columns in every row")
            for y, cell in enumerate(row):
                if (cell.x, cell.y) != (x, y):
                    raise ValueError(
                        f"cell at position ({x}, {y}) has coordinates ({cell.x}, {cell.y})"
                    )

    @classmethod
    def create(cls, size: int, rng: Random | None = None) -> Grid:
        """Seed a new grid with one draw in ``[SEED_MIN, SEED_MAX]`` per cell.

        Draws happen row by row (``x`` outer, ``y`` inner). Without ``rng`` an
        unseeded ``Random`` is used, so the layout is not reproducible.
        """
        _validate_size(size)
        rng = rng if rng is not None else Random()
        cells = [
            [Cell.from_seed(x, y, rng.randint(SEED_MIN, SEED_MAX)) for y in range(size)]
            for x in range(size)
        ]
        return cls(size=size, cells=cells)

    @classmethod
    def from_states(cls, states: Sequence[Sequence[object]]) -> Grid:
        """Build a grid from a square nested sequence of truthy/falsy values."""
        size = len(states)
        _validate_size(size)
        cells: list[list[Cell]] = []
        for x, row in enumerate(states):
            if len(row) != size:
                raise ValueError("states must be square")
            cells.append([Cell(x=x, y=y, alive=bool(value)) for y, value in enumerate(row)])
        return cls(size=size, cells=cells)

    @property
    def is_extinct(self) -> bool:
        return self._extinct

    def snapshot(self) -> Grid:
        """Return a fully independent copy to pass into ``advance``."""
        return copy.deepcopy(self)

    def states(self) -> GridStates:
        return tuple(tuple(cell.alive for cell in row) for row in self.cells)

    def population(self) -> int:
        return sum(cell.alive for row in self.cells for cell in row)

    def any_alive(self) -> bool:
        return any(cell.alive for row in self.cells for cell in row)

    def render(self) -> list[str]:
        """One line per row, each cell as ``[1]``/``[0]`` with no separator."""
        return ["".join(str(cell) for cell in row) for row in self.cells]

    def advance(self, snapshot: Grid) -> bool:
        """Evaluate every cell against ``snapshot``; return whether any cell lives.

        ``snapshot`` must not share rows or cells with this grid. A ``False``
        result marks the grid extinct.
        """
        if self._extinct:
            raise RuntimeError("cannot advance an extinct grid")
        if snapshot.size != self.size:
            raise ValueError(
                f"snapshot size {snapshot.size} does not match grid size {self.size}"
            )
        if self._shares_cells_with(snapshot):
            raise ValueError("snapshot must be an independent copy of the grid")
        for row in self.cells:
            for cell in row:
                cell.evaluate_next_state(snapshot)
        still_alive = self.any_alive()
        if not still_alive:
            self._extinct = True
        return still_alive

    def _shares_cells_with(self, other: Grid) -> bool:
        if other is self or other.cells is self.cells:
            return True
        for live_row, other_row in zip(self.cells, other.cells, strict=True):
            if live_row is other_row:
                return True
            if any(a is b for a, b in zip(live_row, other_row, strict=True)):
                return True
        return False

    def __str__(self) -> str:
        return "\n".join(self.render())
