"""Metrics: population counts and density."""

from conway_life.metrics.population import (
    density,
    grid_to_array,
    population,
    summarize_population,
)

__all__ = [
    "density",
    "grid_to_array",
    "population",
    "summarize_population",
]
