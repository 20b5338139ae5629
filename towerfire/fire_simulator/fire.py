"""
Core building fire simulation model.

This module defines the `FireSim` class, which advances a multi-floor
building simulation by one tick at a time. It extends `BaseFireSim` with
the per-tick transition rule: wall conduction and failure, smoke and heat
diffusion, combustion, ambient relaxation and vertical coupling between
floors.

Classes:
    - FireSim: The main building fire simulation model.

.. autoclass:: FireSim
    :members:
"""

from typing import Optional
import numpy as np

from towerfire.base_classes.base_fire import BaseFireSim
from towerfire.base_classes.grid_manager import GridManager
from towerfire.fire_simulator.cell import Cell
from towerfire.utilities.data_classes import SimParams
from towerfire.utilities.fire_util import CellTypes, PhysicsConstants as pc
from towerfire.utilities.stats import compute_stats


class FireSim(BaseFireSim):
    """A grid-based multi-floor building fire simulation.

    Every call to :meth:`update` is double buffered: the previous tick's floor
    stack is only read from, a copy of it is only written to, and the copy
    replaces the live stack once all floors have been processed. Neighbor
    and adjacent-floor lookups therefore always see the previous tick's
    values, regardless of iteration order.

    Border cells are carried over unchanged; only interior cells run the
    transition rule.

    Attributes:
        logger (Optional[Logger]): A logging utility for storing simulation outputs.
    """
    def __init__(self, sim_params: SimParams, rng: Optional[np.random.Generator] = None):
        """Initializes the building simulation and generates the first layout.

        Args:
            sim_params (SimParams): Structured simulation inputs (dimensions,
                floor count, seed and coupling coefficients).
            rng (np.random.Generator, optional): Random source for layout and
                stochastic ignition. Seeded from ``sim_params.seed`` if omitted.
        """
        print("Fire Simulation Initializing...")

        # Ticks between stats samples sent to the logger
        self._log_freq = max(1, sim_params.stats_interval or 1)

        # Ticks between logger cache flushes to disk
        self._flush_freq = max(1, sim_params.flush_interval or 1)

        super().__init__(sim_params, rng)

    def update(self):
        """Advances the simulation by one tick.

        Behavior:
            - Copies every floor into a next-state buffer.
            - For each interior cell of each floor, reads the previous tick's
              cell, its four neighbors and the cells directly above and below,
              and writes the result into the buffer:
                1. **Walls** lose integrity above the failure temperature,
                   collapse to open space at zero integrity, conduct heat
                   slowly and cool.
                2. **Open and fuel cells** diffuse smoke and heat, ignite or
                   keep burning while fuel lasts, burn out, relax toward
                   ambient and shed smoke.
                3. **Vertical coupling** adds heat and smoke rising from the
                   floor below and removes smoke rising to the floor above.
            - Clamps every updated cell and swaps the buffer in.
            - With a logger attached, samples stats every ``stats_interval``
              ticks and flushes cached rows every ``flush_interval`` ticks.
        """
        next_floors = [grid.copy() for grid in self._floors]

        for f in range(self._num_floors):
            prev_grid = self._floors[f]
            next_grid = next_floors[f]
            below = self._floors[f - 1] if f > 0 else None
            above = self._floors[f + 1] if f < self._num_floors - 1 else None

            for y in range(1, self._height - 1):
                for x in range(1, self._width - 1):
                    curr_cell = prev_grid.cell_grid[y, x]
                    next_cell = next_grid.cell_grid[y, x]

                    if curr_cell.is_wall:
                        self._update_wall(prev_grid, curr_cell, next_cell, x, y)

                    else:
                        self._update_open_cell(prev_grid, curr_cell, next_cell, x, y)
                        self._apply_vertical_coupling(below, above, next_cell, x, y)

                    next_cell.clamp()

        self._floors = next_floors
        self._tick += 1

        if self.logger:
            if self._tick % self._log_freq == 0:
                self._log_changes()

            if self._tick % self._flush_freq == 0:
                self.logger.flush()

    def _update_wall(self, prev_grid: GridManager, curr_cell: Cell, next_cell: Cell, x: int, y: int):
        # Wall failure
        if curr_cell.temperature > pc.WALL_FAILURE_TEMP:
            next_cell.integrity -= pc.WALL_DECAY_RATE

            # Collapse into open space with a burst of heat
            if next_cell.integrity <= 0:
                next_cell.type = CellTypes.EMPTY
                next_cell.integrity = 0
                next_cell.temperature += pc.WALL_COLLAPSE_HEAT
                self._collapsed_walls += 1

        # Walls conduct heat but don't burn
        neighbors = prev_grid.get_neighbors(y, x)
        avg_temp = sum(n.temperature for n in neighbors) / len(neighbors)
        next_cell.temperature += (avg_temp - curr_cell.temperature) * pc.WALL_CONDUCTION

        next_cell.temperature *= pc.WALL_COOLING

    def _update_open_cell(self, prev_grid: GridManager, curr_cell: Cell, next_cell: Cell, x: int, y: int):
        neighbors = prev_grid.get_neighbors(y, x)

        # Smoke diffusion, walls only leak a fraction of theirs
        smoke_sum = 0.0
        temp_sum = 0.0
        for n in neighbors:
            temp_sum += n.temperature
            if n.is_wall:
                smoke_sum += n.smoke * pc.SMOKE_WALL_LEAK
            else:
                smoke_sum += n.smoke

        next_cell.smoke = next_cell.smoke * 0.5 + (smoke_sum / len(neighbors)) * 0.5

        # Heat diffusion, walls conduct fully
        avg_temp = temp_sum / len(neighbors)
        next_cell.temperature += (avg_temp - curr_cell.temperature) * pc.HEAT_TRANSFER

        # Combustion onset
        if curr_cell.type == CellTypes.FUEL and curr_cell.fuel > 0:
            if curr_cell.temperature > pc.IGNITION_TEMP:
                ignition_roll = self._rng.random()

                # Very hot fuel always catches
                if (curr_cell.temperature > pc.IGNITION_TEMP * pc.CERTAIN_IGNITION_FACTOR
                        or ignition_roll < pc.IGNITION_CHANCE):
                    next_cell.fire = min(1.0, curr_cell.fire + pc.FIRE_GROWTH)
                    next_cell.temperature += pc.ONSET_HEAT
                    next_cell.fuel -= pc.ONSET_FUEL_BURN
                    next_cell.smoke += pc.ONSET_SMOKE

        # Sustain existing fire
        if curr_cell.is_burning and curr_cell.fuel > 0:
            next_cell.temperature += pc.SUSTAIN_HEAT
            next_cell.fuel -= pc.SUSTAIN_FUEL_BURN
            next_cell.smoke += pc.SUSTAIN_SMOKE

            # Burn out
            if next_cell.fuel <= 0:
                if curr_cell.type == CellTypes.FUEL:
                    self._burned_out_cells += 1

                next_cell.fire = 0
                next_cell.type = CellTypes.EMPTY

        else:
            # Embers die out
            next_cell.fire *= pc.EMBER_DECAY

        # Cooling and decay
        next_cell.temperature = (next_cell.temperature - pc.AMBIENT_TEMP) * pc.COOLING_RATE + pc.AMBIENT_TEMP
        next_cell.smoke *= pc.SMOKE_DECAY

    def _apply_vertical_coupling(self, below: Optional[GridManager], above: Optional[GridManager],
                                 next_cell: Cell, x: int, y: int):
        if below is not None:
            cell_below = below.cell_grid[y, x]

            # Heat rises
            next_cell.temperature += (cell_below.temperature - pc.AMBIENT_TEMP) * self._vertical_conductivity

            # Smoke rises unless a wall below blocks it
            if not cell_below.is_wall:
                next_cell.smoke += cell_below.smoke * pc.SMOKE_RISE_RATE

        if above is not None:
            cell_above = above.cell_grid[y, x]

            # Smoke leaves toward the floor above
            if not cell_above.is_wall:
                next_cell.smoke -= next_cell.smoke * pc.SMOKE_RISE_RATE * pc.SMOKE_EXHAUST_DAMPING

    def _log_changes(self):
        self.logger.cache_stats(self._tick, compute_stats(self))

    def get_stats(self):
        """Aggregate statistics of the current state.

        Returns:
            SimulationStats: see :func:`~towerfire.utilities.stats.compute_stats`
        """
        return compute_stats(self)
