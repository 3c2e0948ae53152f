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
    SHORT_PERIOD_HISTORY_SIZE,
    STASIS_NEIGHBORS,
)


def test_seed_range_is_zero_to_four() -> None:
    assert (SEED_MIN, SEED_MAX) == (0, 4)


def test_live_seed_values_give_two_in_five_odds() -> None:
    assert set(LIVE_SEED_VALUES) == {0, 2}
    assert all(SEED_MIN <= v <= SEED_MAX for v in LIVE_SEED_VALUES)


def test_rule_counts_are_b3_s23() -> None:
    assert STASIS_NEIGHBORS == 2
    assert BIRTH_NEIGHBORS == 3


def test_glyphs_are_bracketed_digits() -> None:
    assert ALIVE_GLYPH == "[1]"
    assert DEAD_GLYPH == "[0]"


def test_defaults_are_positive() -> None:
    assert isinstance(GRID_SIZE, int) and GRID_SIZE > 0
    assert isinstance(NUM_GENERATIONS, int) and NUM_GENERATIONS > 0
    assert DELAY_SECONDS > 0.0


def test_short_period_history_covers_two_cycles() -> None:
    assert SHORT_PERIOD_HISTORY_SIZE >= 4
