"""Procedural generation of building floor layouts.

Each floor is a rectangle of cells enclosed by an exterior wall ring. Inside,
a periodic corridor pattern is always left open; the remaining room space is
split by a periodic grid of interior walls (with random doorway gaps) and
furnished with randomly loaded fuel cells.

Functions:
    - make_cell: Create the cell at one position of a floor.
    - generate_floor: Build one populated floor grid.
    - generate_building: Build the full floor stack.
"""

from typing import List
import numpy as np

from towerfire.base_classes.grid_manager import GridManager
from towerfire.fire_simulator.cell import Cell
from towerfire.utilities.fire_util import CellTypes, LayoutConstants as lc, UtilFuncs


def make_cell(x: int, y: int, width: int, height: int, rng: np.random.Generator) -> Cell:
    """Create the cell at (x, y) following the building layout rules.

    Args:
        x (int): column index
        y (int): row index
        width (int): number of columns on the floor
        height (int): number of rows on the floor
        rng (np.random.Generator): random source for wall gaps and fuel loads

    Returns:
        Cell: a new cell at ambient temperature
    """
    cell = Cell()

    # Exterior walls
    if UtilFuncs.is_border(x, y, width, height):
        cell.type = CellTypes.WALL
        return cell

    if UtilFuncs.is_corridor(x, y):
        return cell

    if UtilFuncs.is_wall_line(x, y):
        # Interior walls with gaps
        if rng.random() < lc.WALL_PROB:
            cell.type = CellTypes.WALL

    elif rng.random() < lc.FUEL_PROB:
        # Furniture
        cell.type = CellTypes.FUEL
        cell.fuel = lc.FUEL_LOAD_MIN + rng.random() * lc.FUEL_LOAD_RANGE

    return cell


def generate_floor(width: int, height: int, rng: np.random.Generator) -> GridManager:
    """Build one floor grid populated with walls, fuel and open space.

    Args:
        width (int): number of columns
        height (int): number of rows
        rng (np.random.Generator): random source

    Returns:
        GridManager: the populated floor
    """
    grid = GridManager(width, height)
    grid.init_grid(lambda col, row: make_cell(col, row, width, height, rng))
    return grid


def generate_building(width: int, height: int, num_floors: int,
                      rng: np.random.Generator) -> List[GridManager]:
    """Build the full floor stack, index 0 being the ground floor.
    """
    return [generate_floor(width, height, rng) for _ in range(num_floors)]
