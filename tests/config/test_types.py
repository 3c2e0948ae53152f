"""Tests for conway_life.config.types validation."""

from __future__ import annotations

import pytest

from conway_life.config.constants import DELAY_SECONDS, GRID_SIZE, NUM_GENERATIONS
from conway_life.config.types import GridConfig, RunConfig


class TestGridConfig:
    def test_defaults(self) -> None:
        config = GridConfig()
        assert config.size == GRID_SIZE
        assert config.seed is None

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size: int) -> None:
        with pytest.raises(ValueError, match="size must be >= 1"):
            GridConfig(size=size)


class TestRunConfig:
    def test_defaults_are_bounded(self) -> None:
        config = RunConfig()
        assert config.generations == NUM_GENERATIONS
        assert config.delay_seconds == 0.0
        assert config.halt_window is None
        assert config.short_period_max_period is None

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="size must be >= 1"):
            RunConfig(size=0)

    def test_negative_generations_rejected(self) -> None:
        with pytest.raises(ValueError, match="generations must be >= 0"):
            RunConfig(generations=-1)

    def test_zero_generations_allowed(self) -> None:
        assert RunConfig(generations=0).generations == 0

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError, match="delay_seconds"):
            RunConfig(delay_seconds=-0.1)

    def test_halt_window_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="halt_window must be >= 1"):
            RunConfig(halt_window=0)

    def test_short_period_requires_period_of_two(self) -> None:
        with pytest.raises(ValueError, match="short_period_max_period must be >= 2"):
            RunConfig(short_period_max_period=1)

    def test_short_period_history_must_cover_two_periods(self) -> None:
        with pytest.raises(ValueError, match="short_period_history_size"):
            RunConfig(short_period_max_period=3, short_period_history_size=5)

    def test_until_extinct_is_unbounded_and_paced(self) -> None:
        config = RunConfig.until_extinct(size=8)
        assert config.size == 8
        assert config.generations is None
        assert config.delay_seconds == DELAY_SECONDS

    def test_grid_config_carries_size_and_seed(self) -> None:
        assert RunConfig(size=3, seed=9).grid_config() == GridConfig(size=3, seed=9)

    def test_is_frozen(self) -> None:
        config = RunConfig()
        with pytest.raises(AttributeError):
            config.size = 10  # type: ignore[misc]
