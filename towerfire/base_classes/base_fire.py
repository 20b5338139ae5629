"""Base class implementation of the building fire simulation.

`BaseFireSim` owns everything about the simulation except the per-tick
transition rule: the floor stack, the random source, building generation,
``reset()``, the ``ignite()`` entry point and read access for external
collaborators. `FireSim` extends it with ``update()``.

.. autoclass:: BaseFireSim
    :members:
"""

from typing import List, Optional, Tuple
import numpy as np

from towerfire.base_classes.grid_manager import GridManager
from towerfire.exceptions import ConfigurationError, GridError
from towerfire.fire_simulator.cell import Cell
from towerfire.utilities.data_classes import SimParams
from towerfire.utilities.fire_util import CellTypes, PhysicsConstants as pc, UtilFuncs
from towerfire.utilities.layout_generator import generate_building


class BaseFireSim:
    """Floor stack, random source and entry points shared by the simulation.

    The random source is injected at construction. When ``rng`` is omitted a
    ``numpy`` generator is seeded from ``sim_params.seed``, which gives a
    non-deterministic run when the seed is ``None``.
    """
    def __init__(self, sim_params: SimParams, rng: Optional[np.random.Generator] = None):
        print("Initializing fire sim backing array...")

        self._sim_params = sim_params
        self._parse_sim_params(sim_params)

        if rng is None:
            rng = np.random.default_rng(sim_params.seed)
        self._rng = rng

        # Variables to store logger
        self.logger = None

        self._floors: List[GridManager] = []
        self._init_building()

        print("Base initialization complete...")

    def _parse_sim_params(self, sim_params: SimParams):
        """Store and validate simulation dimensions and coupling parameters.

        Raises:
            ConfigurationError: if any dimension or coefficient is out of range.
        """
        if sim_params.width is None or sim_params.width < 3:
            raise ConfigurationError("Grid width must be at least 3", parameter="width")

        if sim_params.height is None or sim_params.height < 3:
            raise ConfigurationError("Grid height must be at least 3", parameter="height")

        if sim_params.num_floors is None or sim_params.num_floors < 1:
            raise ConfigurationError("Building must have at least one floor", parameter="num_floors")

        if sim_params.vertical_conductivity is None or sim_params.vertical_conductivity < 0:
            raise ConfigurationError("Vertical conductivity must be non-negative",
                                     parameter="vertical_conductivity")

        self._width = sim_params.width
        self._height = sim_params.height
        self._num_floors = sim_params.num_floors
        self._vertical_conductivity = sim_params.vertical_conductivity
        self._wind = sim_params.wind

    def _init_building(self):
        """Generate a fresh floor stack and clear all run counters."""
        self._floors = generate_building(self._width, self._height, self._num_floors, self._rng)
        for grid in self._floors:
            grid.logger = self.logger

        self._tick = 0
        self._collapsed_walls = 0
        self._burned_out_cells = 0

    def reset(self):
        """Regenerate the building from scratch.

        Discards all fire, smoke and heat state. The new layout draws fresh
        values from the simulation's random source.
        """
        self._init_building()

        if self.logger:
            self.logger.log_message("Simulation reset, building regenerated.")

    def ignite(self, floor: int, x: int, y: int):
        """Ignite the cell at (x, y) on ``floor``.

        Calls on an invalid floor or on a position outside the interior (the
        border wall ring included) are ignored.

        A cell that is not yet burning (fire at most 0.5) and at most 600
        degrees gets a standard ignition: temperature set to 900, fire set to
        1.0 and fuel raised to at least 50.

        A cell that is already burning or hotter than that instead triggers a
        chimney ignition: the cell is superheated and filled with smoke, and
        the cell at the same position one floor up is breached and set
        alight. Only one floor is crossed per call, so repeated ignition at
        the same position drives fire up the building one level at a time.

        Args:
            floor (int): floor index, 0 being the ground floor
            x (int): column index
            y (int): row index
        """
        if not self._valid_target(floor, x, y):
            return

        cell = self._floors[floor][y][x]

        if self._is_chimney_target(cell):
            self._chimney_ignition(floor, x, y)

        else:
            cell.temperature = pc.IGNITION_SET_TEMP
            cell.fire = 1.0
            cell.fuel = max(pc.MIN_IGNITION_FUEL, cell.fuel)

        if self.logger:
            self.logger.log_message(f"Ignition at floor {floor}, ({x}, {y}) on tick {self._tick}.")

    def is_chimney_ignition(self, floor: int, x: int, y: int) -> bool:
        """Whether ``ignite(floor, x, y)`` would take the chimney path.

        Returns `False` for targets that ``ignite`` would ignore.
        """
        if not self._valid_target(floor, x, y):
            return False

        return self._is_chimney_target(self._floors[floor][y][x])

    def _is_chimney_target(self, cell: Cell) -> bool:
        return cell.fire > pc.CHIMNEY_FIRE_THRESHOLD or cell.temperature > pc.CHIMNEY_TEMP_THRESHOLD
    def _chimney_ignition(self, floor: int, x: int, y: int):
        cell = self._floors[floor][y][x]

        # Superheat current
        cell.temperature += pc.CHIMNEY_SUPERHEAT
        cell.smoke += pc.CHIMNEY_SMOKE
        cell.clamp()

        if floor < self._num_floors - 1:
            cell_above = self._floors[floor + 1][y][x]
            cell_above.temperature = pc.MAX_TEMP
            cell_above.fire = 1.0

            # Blow out the ceiling/wall above
            if cell_above.is_wall:
                cell_above.type = CellTypes.EMPTY

            cell_above.fuel = max(pc.MIN_IGNITION_FUEL, cell_above.fuel)

    def _valid_target(self, floor, x, y) -> bool:
        for val in (floor, x, y):
            if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
                return False

        if not 0 <= floor < self._num_floors:
            return False

        return UtilFuncs.is_interior(x, y, self._width, self._height)

    def get_cell(self, floor: int, x: int, y: int) -> Cell:
        """Return the live cell at (x, y) on ``floor``.

        Raises:
            GridError: if the floor or position is out of range.
        """
        if not 0 <= floor < self._num_floors:
            raise GridError(f"Floor {floor} out of range for building with "
                            f"{self._num_floors} floors")

        return self._floors[floor].get_cell_from_indices(y, x)

    def field_array(self, name: str) -> np.ndarray:
        """Return one cell field for the whole building.

        Args:
            name (str): ``type``, ``temperature``, ``fuel``, ``integrity``,
                ``smoke`` or ``fire``

        Returns:
            np.ndarray: array with shape (num_floors, height, width)
        """
        return np.stack([grid.field_array(name) for grid in self._floors])

    def set_logger(self, logger):
        """Attach a :class:`~towerfire.utilities.logger.Logger` to the simulation."""
        self.logger = logger
        for grid in self._floors:
            grid.logger = logger

    # ------ Properties ------ #

    @property
    def floors(self) -> List[GridManager]:
        """Live floor stack, read as ``floors[floor][y][x]``."""
        return self._floors

    @property
    def num_floors(self) -> int:
        return self._num_floors

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Building dimensions (num_floors, height, width)."""
        return (self._num_floors, self._height, self._width)

    @property
    def tick(self) -> int:
        """Number of completed updates since construction or the last reset."""
        return self._tick

    @property
    def vertical_conductivity(self) -> float:
        return self._vertical_conductivity

    @property
    def wind(self):
        """Configured wind, unused by the transition rule."""
        return self._wind

    @property
    def collapsed_walls(self) -> int:
        """Walls that have failed since construction or the last reset."""
        return self._collapsed_walls

    @property
    def burned_out_cells(self) -> int:
        """Fuel cells that have burned out since construction or the last reset.

        Open cells lit by :meth:`ignite` burn through their ignition fuel
        without being counted.
        """
        return self._burned_out_cells

    @property
    def sim_params(self) -> SimParams:
        return self._sim_params
