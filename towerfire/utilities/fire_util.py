"""Various sets of constants and helper functions useful throughout the codebase

.. autoclass:: CellTypes
    :members:

.. autoclass:: PhysicsConstants
    :members:

.. autoclass:: LayoutConstants
    :members:

.. autoclass:: UtilFuncs
    :members:

"""

from typing import Tuple


class CellTypes:
    """Enumeration of the possible cell types.

    Attributes:
        - **EMPTY** (int): Open circulation space, burned-out fuel or a collapsed wall.
        - **WALL** (int): Structural wall, conducts heat but never combusts.
        - **FUEL** (int): Furniture, carpet and other combustible contents.
    """
    # Cell Types:
    EMPTY, WALL, FUEL = 0, 1, 2

    names = {
        EMPTY: "EMPTY",
        WALL: "WALL",
        FUEL: "FUEL"
    }


class PhysicsConstants:
    """Constants used by the per-tick transition rule.

    Temperatures are in the simulation's arbitrary temperature units (roughly
    degrees Celsius), smoke is a density proxy in [0, 100] and fire is an
    intensity in [0, 1].
    """
    AMBIENT_TEMP = 20
    IGNITION_TEMP = 250
    MAX_TEMP = 1500 # Steel melting point range

    # Walls
    WALL_FAILURE_TEMP = 800 # Concrete spalling / drywall failure
    WALL_DECAY_RATE = 0.5 # Integrity lost per tick above failure temp
    WALL_COLLAPSE_HEAT = 200 # Flashover burst when a wall gives way
    WALL_CONDUCTION = 0.05
    WALL_COOLING = 0.99
    MAX_INTEGRITY = 100

    # Diffusion and decay
    COOLING_RATE = 0.985
    SMOKE_DECAY = 0.99
    SMOKE_WALL_LEAK = 0.1
    HEAT_TRANSFER = 0.25
    MAX_SMOKE = 100

    # Combustion
    IGNITION_CHANCE = 0.15
    CERTAIN_IGNITION_FACTOR = 1.5
    FIRE_GROWTH = 0.15
    ONSET_HEAT = 60
    ONSET_FUEL_BURN = 0.6
    ONSET_SMOKE = 8
    SUSTAIN_HEAT = 30
    SUSTAIN_FUEL_BURN = 0.3
    SUSTAIN_SMOKE = 4
    EMBER_DECAY = 0.8

    # Vertical coupling
    SMOKE_RISE_RATE = 0.4
    SMOKE_EXHAUST_DAMPING = 0.8
    DEFAULT_VERTICAL_CONDUCTIVITY = 0.08

    # Ignition entry point
    IGNITION_SET_TEMP = 900
    MIN_IGNITION_FUEL = 50
    CHIMNEY_TEMP_THRESHOLD = 600
    CHIMNEY_FIRE_THRESHOLD = 0.5
    CHIMNEY_SUPERHEAT = 500
    CHIMNEY_SMOKE = 50


class LayoutConstants:
    """Constants for procedural building generation.

    Corridors run through bands of ``x % CORRIDOR_PERIOD_X`` and
    ``y % CORRIDOR_PERIOD_Y``, bounds exclusive. Interior wall lines sit where
    either modulus is zero.
    """
    GRID_WIDTH = 60
    GRID_HEIGHT = 40
    NUM_FLOORS = 3

    CORRIDOR_PERIOD_X = 20
    CORRIDOR_BAND_X = (8, 12)
    CORRIDOR_PERIOD_Y = 15
    CORRIDOR_BAND_Y = (6, 9)

    WALL_PROB = 0.85 # Remaining 15% are doorways
    FUEL_PROB = 0.7
    FUEL_LOAD_MIN = 70
    FUEL_LOAD_RANGE = 30


class UtilFuncs:
    """Various utility functions that are useful across numerous files.
    """
    def is_border(x: int, y: int, width: int, height: int) -> bool:
        """Check whether (x, y) lies on the outermost ring of a grid.

        :param x: column index
        :type x: int
        :param y: row index
        :type y: int
        :param width: number of columns in the grid
        :type width: int
        :param height: number of rows in the grid
        :type height: int
        :return: `True` if the position is on the border ring
        :rtype: bool
        """
        return x == 0 or y == 0 or x == width - 1 or y == height - 1

    def is_interior(x: int, y: int, width: int, height: int) -> bool:
        """Check whether (x, y) lies strictly inside the border ring.

        :return: `True` if the position is an interior cell
        :rtype: bool
        """
        return 0 < x < width - 1 and 0 < y < height - 1

    def is_corridor(x: int, y: int) -> bool:
        """Check whether (x, y) falls in a periodic corridor band.

        :return: `True` if the position is circulation space
        :rtype: bool
        """
        lo_x, hi_x = LayoutConstants.CORRIDOR_BAND_X
        lo_y, hi_y = LayoutConstants.CORRIDOR_BAND_Y
        x_mod = x % LayoutConstants.CORRIDOR_PERIOD_X
        y_mod = y % LayoutConstants.CORRIDOR_PERIOD_Y

        return (lo_x < x_mod < hi_x) or (lo_y < y_mod < hi_y)

    def is_wall_line(x: int, y: int) -> bool:
        """Check whether (x, y) falls on the periodic interior wall grid.

        :return: `True` if the position is on a wall line
        :rtype: bool
        """
        return (x % LayoutConstants.CORRIDOR_PERIOD_X == 0
                or y % LayoutConstants.CORRIDOR_PERIOD_Y == 0)

    def orthogonal_offsets() -> Tuple[Tuple[int, int], ...]:
        """Return the (dx, dy) offsets of the four orthogonal neighbors.

        Ordered north, south, west, east.
        """
        return ((0, -1), (0, 1), (-1, 0), (1, 0))
