"""Grid management for a single building floor.

This module provides the GridManager class which handles all grid-related
operations for one floor of the simulation, including cell storage, bounds
checks, neighbor lookups and whole-grid copies for double buffering.

Classes:
    - GridManager: Manages the rectangular cell grid of one floor.
"""

from typing import Optional, List, Tuple, Callable
import numpy as np

from towerfire.exceptions import GridError
from towerfire.fire_simulator.cell import Cell
from towerfire.utilities.fire_util import UtilFuncs


class GridManager:
    """Manages the rectangular cell grid of one floor.

    Cells are addressed as ``grid[y][x]`` (row first) to match the way
    external readers enumerate floors.

    Attributes:
        cell_grid (np.ndarray): 2D array of Cell objects, shape (height, width).
        shape (Tuple[int, int]): Grid dimensions (height, width).
    """

    FIELDS = ("type", "temperature", "fuel", "integrity", "smoke", "fire")

    def __init__(self, width: int, height: int):
        """Initialize the grid manager.

        Creates the backing array for the grid but does not populate cells.
        Use init_grid() to populate with Cell objects.

        Args:
            width: Number of columns in the grid.
            height: Number of rows in the grid.
        """
        self._width = width
        self._height = height

        self._shape = (height, width)
        self._cell_grid = np.empty(self._shape, dtype=object)

        # Reference to logger for error messages (set by parent)
        self.logger = None

    def __getitem__(self, idx):
        return self._cell_grid[idx]

    @property
    def cell_grid(self) -> np.ndarray:
        """2D array of Cell objects."""
        return self._cell_grid

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (height, width)."""
        return self._shape

    @property
    def width(self) -> int:
        """Number of columns in the grid."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows in the grid."""
        return self._height

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Place a cell in the grid at the specified position.

        Args:
            row: Row index (y).
            col: Column index (x).
            cell: Cell object to place.
        """
        self._cell_grid[row, col] = cell

    def init_grid(self,
                  cell_factory: Callable[[int, int], Cell],
                  progress_callback: Optional[Callable[[int], None]] = None) -> None:
        """Initialize the grid by creating cells using the provided factory.

        Iterates through all grid positions row by row and calls the cell
        factory to create each cell.

        Args:
            cell_factory: Callable that takes (col, row) and returns a fully
                initialized Cell object.
            progress_callback: Optional callable that takes the number of cells
                processed (1 per call) for progress tracking.
        """
        for row in range(self._height):
            for col in range(self._width):
                self.set_cell(row, col, cell_factory(col, row))

                if progress_callback is not None:
                    progress_callback(1)

    def copy(self) -> 'GridManager':
        """Return a new grid holding independent copies of every cell.

        The copy is used as the write buffer of a tick while this grid stays
        the read buffer.
        """
        new_grid = GridManager(self._width, self._height)
        new_grid.logger = self.logger
        for row in range(self._height):
            for col in range(self._width):
                new_grid._cell_grid[row, col] = self._cell_grid[row, col].copy()

        return new_grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def is_interior(self, row: int, col: int) -> bool:
        """Whether (row, col) lies strictly inside the border wall ring."""
        return UtilFuncs.is_interior(col, row, self._width, self._height)

    def get_cell_from_indices(self, row: int, col: int) -> Cell:
        """Return the cell at grid indices [row, col].

        Args:
            row: Row index (y) of the desired cell.
            col: Column index (x) of the desired cell.

        Returns:
            Cell at the specified indices.

        Raises:
            TypeError: If row or col is not an integer.
            GridError: If row or col is out of bounds.
        """
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            msg = (f"Row and column must be integer index values. "
                f"Input was {type(row)}, {type(col)}")

            if self.logger:
                self.logger.log_message(f"Following error occurred in 'GridManager.get_cell_from_indices(): "
                                        f"{msg}")
            raise TypeError(msg)

        if not self.in_bounds(row, col):
            msg = (f"Out of bounds error. Indices are out of bounds for grid of size "
                f"{self._height}, {self._width}")

            if self.logger:
                self.logger.log_message(f"Following error occurred in 'GridManager.get_cell_from_indices(): "
                                        f"{msg}")
            raise GridError(msg, row=row, col=col)

        return self._cell_grid[row, col]

    def get_neighbors(self, row: int, col: int) -> List[Cell]:
        """Return the four orthogonal neighbors of an interior cell.

        Ordered north, south, west, east. Callers only use this on interior
        cells, so every neighbor exists.
        """
        return [self._cell_grid[row + dy, col + dx] for dx, dy in UtilFuncs.orthogonal_offsets()]

    def field_array(self, name: str) -> np.ndarray:
        """Extract one cell field across the grid.

        Args:
            name: One of ``type``, ``temperature``, ``fuel``, ``integrity``,
                ``smoke`` or ``fire``.

        Returns:
            2D float array with shape (height, width).

        Raises:
            ValueError: If ``name`` is not a readable cell field.
        """
        if name not in self.FIELDS:
            raise ValueError(f"Unknown cell field: {name}")

        getter = np.frompyfunc(lambda cell: getattr(cell, name), 1, 1)
        return getter(self._cell_grid).astype(float)
