"""Representation of the discrete cells that make up the building simulation.

This module defines the `Cell` class, which represents the fundamental unit of
a floor grid. Each `Cell` stores the thermal, combustion and structural state
at one (x, y) position of one floor.

Classes:
    - Cell: A square simulation unit holding heat, smoke, fire and wall state.

.. autoclass:: Cell
    :members:
"""
from towerfire.utilities.fire_util import CellTypes, PhysicsConstants as pc


class Cell:
    """Represents a single grid cell on one floor of the building.

    Cells are value-like: every tick the simulation builds a fresh copy of each
    cell for the next-state grid, so no cell object survives across ticks.

    Attributes:
        type (int): One of :py:attr:`CellTypes.EMPTY`, :py:attr:`CellTypes.WALL`
            or :py:attr:`CellTypes.FUEL`.
        temperature (float): Cell temperature, capped at ``MAX_TEMP``.
        fuel (float): Remaining combustible load, consumed while burning.
        integrity (float): Structural health of a wall, between 0 and 100.
        smoke (float): Smoke density proxy, between 0 and 100.
        fire (float): Combustion intensity, 0 (not burning) to 1.
        vx (float): Reserved velocity component, not used by any transition.
        vy (float): Reserved velocity component, not used by any transition.
    """

    def __init__(self, cell_type: int = CellTypes.EMPTY,
                 temperature: float = pc.AMBIENT_TEMP,
                 fuel: float = 0.0,
                 integrity: float = pc.MAX_INTEGRITY,
                 smoke: float = 0.0,
                 fire: float = 0.0):
        self.type = cell_type
        self.temperature = temperature
        self.fuel = fuel
        self.integrity = integrity
        self.smoke = smoke
        self.fire = fire

        # Reserved, nothing reads these
        self.vx = 0.0
        self.vy = 0.0

    def copy(self) -> 'Cell':
        """Returns an independent copy of the cell for the next-state grid.
        """
        new_cell = Cell(self.type, self.temperature, self.fuel, self.integrity,
                        self.smoke, self.fire)
        new_cell.vx = self.vx
        new_cell.vy = self.vy
        return new_cell

    def clamp(self):
        """Enforces the cell's value bounds in place.

        Temperature is capped at ``MAX_TEMP``, smoke is kept within [0, 100],
        integrity is floored at 0, fire kept within [0, 1] and fuel floored
        at 0.
        """
        self.temperature = min(self.temperature, pc.MAX_TEMP)
        self.smoke = min(max(self.smoke, 0.0), pc.MAX_SMOKE)
        self.integrity = max(0.0, self.integrity)
        self.fire = min(max(self.fire, 0.0), 1.0)
        self.fuel = max(0.0, self.fuel)

    @property
    def is_wall(self) -> bool:
        return self.type == CellTypes.WALL

    @property
    def is_burning(self) -> bool:
        """`True` if the cell has any fire intensity."""
        return self.fire > 0

    def to_log_format(self) -> dict:
        """Returns a dictionary of the cell's readable fields.

        Returns:
            dict: ``type``, ``temperature``, ``fuel``, ``integrity``, ``smoke``
            and ``fire``.
        """
        return {
            "type": self.type,
            "temperature": self.temperature,
            "fuel": self.fuel,
            "integrity": self.integrity,
            "smoke": self.smoke,
            "fire": self.fire,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.to_log_format() == other.to_log_format()

    def __str__(self):
        """Returns a formatted string representation of the cell.
        """
        return (f"(type: {CellTypes.names[self.type]}, temp: {self.temperature:.1f}, "
                f"fuel: {self.fuel:.1f}, integrity: {self.integrity:.1f}, "
                f"smoke: {self.smoke:.1f}, fire: {self.fire:.2f})")
