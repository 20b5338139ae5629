"""Tests for Cell class.

These tests validate the building cell value type including defaults,
copy independence and bound enforcement.
"""

import pytest
from towerfire.fire_simulator.cell import Cell
from towerfire.utilities.fire_util import CellTypes, PhysicsConstants as pc


class TestCellInitialization:
    """Tests for Cell initialization."""

    def test_defaults(self):
        """A default cell is empty open space at ambient temperature."""
        cell = Cell()

        assert cell.type == CellTypes.EMPTY
        assert cell.temperature == pc.AMBIENT_TEMP
        assert cell.fuel == 0.0
        assert cell.integrity == pc.MAX_INTEGRITY
        assert cell.smoke == 0.0
        assert cell.fire == 0.0
        assert cell.vx == 0.0
        assert cell.vy == 0.0

    def test_explicit_values(self):
        """Constructor arguments should be stored as given."""
        cell = Cell(CellTypes.FUEL, temperature=300, fuel=80, integrity=50, smoke=10, fire=0.4)

        assert cell.type == CellTypes.FUEL
        assert cell.temperature == 300
        assert cell.fuel == 80
        assert cell.integrity == 50
        assert cell.smoke == 10
        assert cell.fire == 0.4

    def test_is_wall(self):
        assert Cell(CellTypes.WALL).is_wall
        assert not Cell(CellTypes.FUEL).is_wall

    def test_is_burning(self):
        assert Cell(fire=0.01).is_burning
        assert not Cell().is_burning


class TestCellCopy:
    """Tests for copying cells into the next-state buffer."""

    def test_copy_is_equal(self):
        cell = Cell(CellTypes.FUEL, temperature=420, fuel=75, smoke=3, fire=0.5)
        assert cell.copy() == cell

    def test_copy_is_independent(self):
        """Mutating a copy must not affect the original."""
        cell = Cell(CellTypes.FUEL, temperature=420, fuel=75)
        new_cell = cell.copy()

        new_cell.temperature = 1000
        new_cell.fuel = 0
        new_cell.type = CellTypes.EMPTY

        assert cell.temperature == 420
        assert cell.fuel == 75
        assert cell.type == CellTypes.FUEL

    def test_copy_keeps_reserved_fields(self):
        cell = Cell()
        cell.vx = 1.5
        cell.vy = -2.0

        new_cell = cell.copy()

        assert new_cell.vx == 1.5
        assert new_cell.vy == -2.0


class TestCellClamp:
    """Tests for value bound enforcement."""

    def test_temperature_capped(self):
        cell = Cell(temperature=2500)
        cell.clamp()
        assert cell.temperature == pc.MAX_TEMP

    def test_temperature_not_floored(self):
        """Only an upper temperature bound is enforced."""
        cell = Cell(temperature=5)
        cell.clamp()
        assert cell.temperature == 5

    @pytest.mark.parametrize("smoke,expected", [(-3.0, 0.0), (150.0, 100.0), (42.0, 42.0)])
    def test_smoke_bounds(self, smoke, expected):
        cell = Cell(smoke=smoke)
        cell.clamp()
        assert cell.smoke == expected

    def test_integrity_floored(self):
        cell = Cell(CellTypes.WALL, integrity=-0.5)
        cell.clamp()
        assert cell.integrity == 0.0

    def test_fire_and_fuel_bounds(self):
        cell = Cell(fuel=-0.2, fire=1.3)
        cell.clamp()
        assert cell.fuel == 0.0
        assert cell.fire == 1.0


class TestCellFormatting:
    """Tests for log and string formatting."""

    def test_to_log_format(self):
        cell = Cell(CellTypes.WALL, temperature=30, integrity=80)

        assert cell.to_log_format() == {
            "type": CellTypes.WALL,
            "temperature": 30,
            "fuel": 0.0,
            "integrity": 80,
            "smoke": 0.0,
            "fire": 0.0,
        }

    def test_str_contains_type_name(self):
        assert "WALL" in str(Cell(CellTypes.WALL))
        assert "FUEL" in str(Cell(CellTypes.FUEL))

    def test_not_equal_to_other_types(self):
        assert Cell() != "cell"
