"""Aggregate statistics derived from the simulation's per-cell state.

Only non-wall cells contribute. A floor's danger level combines its burning
cell count and its smoke load, saturating at 100.
"""

import numpy as np

from towerfire.utilities.data_classes import FloorStats, SimulationStats
from towerfire.utilities.fire_util import CellTypes

FIRE_DANGER_WEIGHT = 2
SMOKE_DANGER_WEIGHT = 0.5
MAX_DANGER = 100


def danger_level(fire_cells: int, smoke: float) -> float:
    """Danger score of a floor with ``fire_cells`` burning cells and ``smoke`` total smoke."""
    return min(MAX_DANGER, fire_cells * FIRE_DANGER_WEIGHT + smoke * SMOKE_DANGER_WEIGHT)


def compute_stats(fire) -> SimulationStats:
    """Compute building-wide and per-floor statistics.

    Args:
        fire (BaseFireSim): simulation to summarize

    Returns:
        SimulationStats: active fire cell count, total smoke mass, average
        temperature over non-wall cells and a danger level per floor
    """
    types = fire.field_array("type")
    temps = fire.field_array("temperature")
    smoke = fire.field_array("smoke")
    fire_vals = fire.field_array("fire")

    open_mask = types != CellTypes.WALL
    burning = open_mask & (fire_vals > 0)

    cell_count = int(np.count_nonzero(open_mask))
    avg_temp = float(temps[open_mask].sum() / cell_count) if cell_count > 0 else 0.0

    floor_stats = []
    for f in range(types.shape[0]):
        floor_fire = int(np.count_nonzero(burning[f]))
        floor_smoke = float(smoke[f][open_mask[f]].sum())
        floor_stats.append(FloorStats(floor_index=f, danger_level=danger_level(floor_fire, floor_smoke)))

    return SimulationStats(
        active_fire_cells=int(np.count_nonzero(burning)),
        total_smoke_mass=float(smoke[open_mask].sum()),
        average_temperature=avg_temp,
        floor_stats=floor_stats
    )
