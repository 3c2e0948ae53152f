"""Caller-side stop detectors.

These never influence ``Grid.advance``; the simulation runner consults them
after each generation when the run config enables them.
"""

from __future__ import annotations

from collections import deque
from enum import Enum

from conway_life.domain.grid import GridStates


class TerminationReason(str, Enum):
    """Termination reason labels reported in run summaries."""

    EXTINCT = "extinct"
    HALT = "halt"
    SHORT_PERIOD = "short_period"


class HaltDetector:
    """Report a still life: the grid unchanged across ``window`` consecutive ticks."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._previous: GridStates | None = None
        self._streak = 0

    def observe(self, states: GridStates) -> bool:
        self._streak = self._streak + 1 if states == self._previous else 0
        self._previous = states
        return self._streak >= self.window


class ShortPeriodDetector:
    """Detect a grid revisiting a recent state with period in ``[2, max_period]``.

    Period 1 (a still life) is left to ``HaltDetector``.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period * 2:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self._history: deque[GridStates] = deque(maxlen=history_size)

    def observe(self, states: GridStates) -> bool:
        self._history.append(states)
        history = list(self._history)
        for period in range(2, self.max_period + 1):
            if len(history) <= period:
                break
            if history[-1] == history[-1 - period] and history[-1] != history[-2]:
                return True
        return False
