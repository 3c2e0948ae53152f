"""Centralized constants for the Game of Life engine and runner.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

SEED_MIN = 0
"""Smallest seed value drawn per cell at grid construction."""

SEED_MAX = 4
"""Largest seed value drawn per cell at grid construction (inclusive)."""

LIVE_SEED_VALUES: tuple[int, ...] = (0, 2)
"""Seed values that produce a live cell (2 in 5 odds)."""

STASIS_NEIGHBORS = 2
"""Live-neighbor count that leaves a cell's state unchanged."""

BIRTH_NEIGHBORS = 3
"""Live-neighbor count that makes a cell alive regardless of its state."""

ALIVE_GLYPH = "[1]"
"""Rendered form of a live cell."""

DEAD_GLYPH = "[0]"
"""Rendered form of a dead cell."""

GRID_SIZE = 5
"""Default grid side length."""

NUM_GENERATIONS = 5
"""Default number of generations for a bounded run."""

DELAY_SECONDS = 0.5
"""Default pause between generations when running until extinction."""

SHORT_PERIOD_HISTORY_SIZE = 8
"""Default number of past generations kept by the short-period detector."""
