"""Tests for the simulation runner (run_simulation)."""

from __future__ import annotations

from random import Random

from conway_life.config.types import RunConfig, SimulationResult
from conway_life.domain.grid import Grid
from conway_life.simulation.engine import emit_grid, run_simulation


class SeedFromStates:
    """Stands in for ``Random``: replays seeds that rebuild ``states`` exactly."""

    def __init__(self, states: list[list[int]]) -> None:
        self._values = iter(0 if alive else 1 for row in states for alive in row)

    def randint(self, a: int, b: int) -> int:
        return next(self._values)


FULL_2X2 = [[1, 1], [1, 1]]

BLINKER = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
]


def _run(
    config: RunConfig, states: list[list[int]]
) -> tuple[SimulationResult, list[str], list[float]]:
    lines: list[str] = []
    sleeps: list[float] = []
    result = run_simulation(
        config,
        rng=SeedFromStates(states),  # type: ignore[arg-type]
        sink=lines.append,
        sleep=sleeps.append,
    )
    return result, lines, sleeps


class TestEmitGrid:
    def test_rows_then_blank_line(self) -> None:
        lines: list[str] = []
        emit_grid(Grid.from_states([[1, 0], [0, 0]]), lines.append)
        assert lines == ["[1][0]", "[0][0]", ""]


class TestRunSimulation:
    def test_bounded_run_completes(self) -> None:
        result, lines, _ = _run(RunConfig(size=2, generations=3), FULL_2X2)
        assert result.generations == 3
        assert result.survived is True
        assert result.terminated_at is None
        assert result.termination_reason is None
        assert result.population_history == (4, 4, 4, 4)
        assert lines == ["[1][1]", "[1][1]", ""] * 4

    def test_zero_generations_emits_seed_only(self) -> None:
        result, lines, _ = _run(RunConfig(size=2, generations=0), FULL_2X2)
        assert result.generations == 0
        assert result.population_history == (4,)
        assert len(lines) == 3

    def test_extinction_stops_unbounded_run(self) -> None:
        lonely = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
        config = RunConfig.until_extinct(size=3, delay_seconds=0.5)
        result, lines, sleeps = _run(config, lonely)
        assert result.survived is False
        assert result.terminated_at == 1
        assert result.termination_reason == "extinct"
        assert result.population_history == (1, 0)
        assert lines[-4:] == ["[0][0][0]"] * 3 + [""]
        assert sleeps == []

    def test_delay_paces_between_generations(self) -> None:
        config = RunConfig(size=2, generations=3, delay_seconds=0.25)
        _, _, sleeps = _run(config, FULL_2X2)
        assert sleeps == [0.25, 0.25]

    def test_no_sleep_without_delay(self) -> None:
        _, _, sleeps = _run(RunConfig(size=2, generations=3), FULL_2X2)
        assert sleeps == []

    def test_halt_detector_stops_still_life(self) -> None:
        config = RunConfig(size=2, generations=50, halt_window=2)
        result, _, _ = _run(config, FULL_2X2)
        assert result.terminated_at == 2
        assert result.termination_reason == "halt"
        assert result.survived is True

    def test_short_period_detector_stops_blinker(self) -> None:
        config = RunConfig(
            size=5, generations=50, short_period_max_period=2, short_period_history_size=4
        )
        result, _, _ = _run(config, BLINKER)
        assert result.terminated_at == 2
        assert result.termination_reason == "short_period"
        assert result.population_history == (3, 3, 3)

    def test_blinker_runs_to_limit_without_detectors(self) -> None:
        result, _, _ = _run(RunConfig(size=5, generations=6), BLINKER)
        assert result.generations == 6
        assert result.termination_reason is None

    def test_seeded_runs_are_reproducible(self) -> None:
        config = RunConfig(size=6, generations=4, seed=7)
        first: list[str] = []
        second: list[str] = []
        result_a = run_simulation(config, sink=first.append)
        result_b = run_simulation(config, sink=second.append)
        assert result_a == result_b
        assert first == second

    def test_explicit_rng_overrides_seed(self) -> None:
        config = RunConfig(size=5, generations=0, seed=1)
        lines: list[str] = []
        run_simulation(config, rng=Random(99), sink=lines.append)
        assert lines == Grid.create(5, Random(99)).render() + [""]
