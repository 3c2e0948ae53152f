"""Caller-driven simulation loop: snapshot, advance, emit, pace, stop."""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable, Iterable
from random import Random

from conway_life.config.types import RunConfig, SimulationResult
from conway_life.domain.filters import HaltDetector, ShortPeriodDetector, TerminationReason
from conway_life.domain.grid import Grid

logger = logging.getLogger(__name__)

Sink = Callable[[str], object]
"""Receives rendered text one line at a time."""


def emit_grid(grid: Grid, sink: Sink) -> None:
    """Write every rendered row, then a blank separator line."""
    for line in grid.render():
        sink(line)
    sink("")


def _generation_range(generations: int | None) -> Iterable[int]:
    if generations is None:
        return itertools.count(1)
    return range(1, generations + 1)


def run_simulation(
    config: RunConfig | None = None,
    rng: Random | None = None,
    sink: Sink = print,
    sleep: Callable[[float], object] = time.sleep,
) -> SimulationResult:
    """Seed a grid and advance it until the generation limit or a stop condition.

    Generation 0 (the seeded grid) is emitted before the first tick. When
    ``rng`` is omitted, ``Random(config.seed)`` seeds the grid.
    """
    config = config or RunConfig()
    grid_config = config.grid_config()
    grid = Grid.create(grid_config.size, rng if rng is not None else Random(grid_config.seed))
    emit_grid(grid, sink)

    halt_detector = HaltDetector(config.halt_window) if config.halt_window is not None else None
    period_detector = (
        ShortPeriodDetector(config.short_period_max_period, config.short_period_history_size)
        if config.short_period_max_period is not None
        else None
    )
    initial_states = grid.states()
    if halt_detector is not None:
        halt_detector.observe(initial_states)
    if period_detector is not None:
        period_detector.observe(initial_states)

    population_history = [grid.population()]
    logger.debug("generation 0: population=%d", population_history[0])
    reason: TerminationReason | None = None
    terminated_at: int | None = None

    for generation in _generation_range(config.generations):
        if generation > 1 and config.delay_seconds > 0.0:
            sleep(config.delay_seconds)

        still_alive = grid.advance(grid.snapshot())
        emit_grid(grid, sink)
        population_history.append(grid.population())
        logger.debug("generation %d: population=%d", generation, population_history[-1])

        if not still_alive:
            reason = TerminationReason.EXTINCT
        else:
            states = grid.states()
            if halt_detector is not None and halt_detector.observe(states):
                reason = TerminationReason.HALT
            elif period_detector is not None and period_detector.observe(states):
                reason = TerminationReason.SHORT_PERIOD
        if reason is not None:
            terminated_at = generation
            logger.info("terminated at generation %d: %s", generation, reason.value)
            break

    generations_run = len(population_history) - 1
    if reason is None:
        logger.info("completed %d generations", generations_run)

    return SimulationResult(
        generations=generations_run,
        survived=not grid.is_extinct,
        terminated_at=terminated_at,
        termination_reason=reason.value if reason is not None else None,
        population_history=tuple(population_history),
    )
