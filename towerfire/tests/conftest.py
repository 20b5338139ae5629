"""Shared pytest fixtures for the towerfire test suite.

This module provides reusable fixtures for testing towerfire components,
including small seeded simulations, blanked buildings with controlled
contents and config file helpers.
"""

import pytest
import numpy as np


# ============================================================================
# Simulation Parameter Fixtures
# ============================================================================

@pytest.fixture
def small_params():
    """Provide parameters for a small, seeded three-floor building.

    Returns:
        SimParams: 24 x 16 cells per floor, large enough to include a corridor
        band (x = 9..11) and an interior wall line (x = 20).
    """
    from towerfire.utilities.data_classes import SimParams
    return SimParams(width=24, height=16, num_floors=3, num_ticks=10, seed=1234)


@pytest.fixture
def small_fire(small_params):
    """Provide a freshly generated seeded simulation.

    Returns:
        FireSim: simulation built from ``small_params``.
    """
    from towerfire.fire_simulator.fire import FireSim
    return FireSim(small_params)


def blank_building(fire):
    """Replace every interior cell with an empty cell at ambient temperature.

    Border walls are left untouched.
    """
    from towerfire.fire_simulator.cell import Cell

    for grid in fire.floors:
        for y in range(1, fire.height - 1):
            for x in range(1, fire.width - 1):
                grid.set_cell(y, x, Cell())


@pytest.fixture
def blank_fire(small_fire):
    """Provide a simulation whose interior is entirely empty ambient space.

    Returns:
        FireSim: simulation with no fuel, no interior walls and no heat.
    """
    blank_building(small_fire)
    return small_fire


# ============================================================================
# Random Number Generator Fixtures
# ============================================================================

@pytest.fixture
def seeded_rng():
    """Provide seeded random number generator for reproducible tests.

    Returns:
        np.random.Generator: Seeded RNG with seed 42.
    """
    return np.random.default_rng(42)


@pytest.fixture
def rng_factory():
    """Provide factory for creating seeded random number generators.

    Returns:
        Callable: Function that takes a seed and returns an RNG.
    """
    def _create_rng(seed=42):
        return np.random.default_rng(seed)
    return _create_rng


# ============================================================================
# Config File Fixtures
# ============================================================================

@pytest.fixture
def write_cfg(tmp_path):
    """Provide a helper that writes config text to a temporary .cfg file.

    Returns:
        Callable: Function that takes file contents and returns the path.
    """
    def _write(contents: str, name: str = "run.cfg") -> str:
        path = tmp_path / name
        path.write_text(contents)
        return str(path)
    return _write
