"""CLI entrypoint for running a Game of Life simulation.

This module owns argument parsing and config resolution. Domain logic lives
in:

- ``conway_life.config``            – constants and configuration dataclasses
- ``conway_life.domain``            – cells, grid, stop detectors
- ``conway_life.simulation.engine`` – the generation loop
- ``conway_life.metrics``           – population summary
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path

from conway_life.config.constants import (
    DELAY_SECONDS,
    GRID_SIZE,
    NUM_GENERATIONS,
    SHORT_PERIOD_HISTORY_SIZE,
)
from conway_life.config.types import RunConfig
from conway_life.metrics.population import summarize_population
from conway_life.simulation.engine import run_simulation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_UNSET: object = object()
"""Sentinel for a setting given neither on the command line nor in the file."""

# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------


def _lookup(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _as_int(raw: object, key: str) -> int:
    """Accept ints and integral floats (JSON numbers); reject booleans."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise ValueError(f"{key} must be an integer value, got {raw!r}")


def _as_optional_int(raw: object, key: str) -> int | None:
    return None if raw is None else _as_int(raw, key)


def _as_float(raw: object, key: str) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    raise ValueError(f"{key} must be a number, got {raw!r}")


def _as_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    raise ValueError(f"{key} must be true or false, got {raw!r}")


def _resolve_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Merge CLI arguments and config-file values into a validated ``RunConfig``.

    ``generations`` set to null in the config file means "until extinct", the
    same as ``forever``. Combining ``forever`` with an explicit generation
    count is rejected.
    """
    forever = _as_bool(_lookup(args.forever, "forever", file_cfg, False), "forever")
    raw_generations = _lookup(args.generations, "generations", file_cfg, _UNSET)
    generations: int | None
    if forever:
        if raw_generations is not _UNSET and raw_generations is not None:
            raise ValueError("generations cannot be combined with forever")
        generations = None
    elif raw_generations is _UNSET:
        generations = NUM_GENERATIONS
    else:
        generations = _as_optional_int(raw_generations, "generations")

    default_delay = DELAY_SECONDS if generations is None else 0.0
    return RunConfig(
        size=_as_int(_lookup(args.size, "size", file_cfg, GRID_SIZE), "size"),
        generations=generations,
        delay_seconds=_as_float(
            _lookup(args.delay, "delay_seconds", file_cfg, default_delay), "delay_seconds"
        ),
        seed=_as_optional_int(_lookup(args.seed, "seed", file_cfg, None), "seed"),
        halt_window=_as_optional_int(
            _lookup(args.halt_window, "halt_window", file_cfg, None), "halt_window"
        ),
        short_period_max_period=_as_optional_int(
            _lookup(args.short_period_max_period, "short_period_max_period", file_cfg, None),
            "short_period_max_period",
        ),
        short_period_history_size=_as_int(
            _lookup(
                args.short_period_history_size,
                "short_period_history_size",
                file_cfg,
                SHORT_PERIOD_HISTORY_SIZE,
            ),
            "short_period_history_size",
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life on a square grid")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--size", type=int, default=None, help="Grid side length")
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument(
        "--forever",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run until the grid goes extinct, pausing between generations",
    )
    parser.add_argument("--delay", type=float, default=None, help="Seconds between generations")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible grids")
    parser.add_argument("--halt-window", type=int, default=None)
    parser.add_argument("--short-period-max-period", type=int, default=None)
    parser.add_argument("--short-period-history-size", type=int, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"Config file could not be read: {args.config}: {exc}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        run_config = _resolve_run_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    result = run_simulation(run_config)
    summary = {
        "size": run_config.size,
        **dataclasses.asdict(result),
        "population": summarize_population(result.population_history),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
