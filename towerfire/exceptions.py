"""Exceptions raised by towerfire.

Exception Hierarchy:
    TowerFireError (base)
    ├── ConfigurationError - bad .cfg file or simulation parameters
    ├── ValidationError - a record built with out-of-range values
    └── GridError - an explicit cell lookup outside a floor

The simulation core itself never raises for bad ignition targets; ``ignite``
ignores them.

Example:
    >>> from towerfire.exceptions import ConfigurationError
    >>> raise ConfigurationError("Grid width must be at least 3", parameter="width")
"""

from typing import Optional


def _with_details(message: str, *details: Optional[str]) -> str:
    """Append the non-empty ``details`` to ``message`` in parentheses."""
    details = [d for d in details if d]
    if not details:
        return message

    return f"{message} ({', '.join(details)})"


class TowerFireError(Exception):
    """Base class for every towerfire error.

    Example:
        >>> try:
        ...     sim_params = load_sim_params("tower.cfg")
        ... except TowerFireError as e:
        ...     print(f"Could not start the run: {e}")
    """


class ConfigurationError(TowerFireError):
    """Raised for a missing config file or invalid simulation parameters.

    Covers unreadable values, dimensions too small to hold a border ring,
    negative coupling coefficients and malformed ``[Ignitions]`` lines.

    Attributes:
        config_path (str): Config file being read, if any.
        parameter (str): Offending key, if known.
    """

    def __init__(self, message: str, config_path: Optional[str] = None, parameter: Optional[str] = None):
        self.config_path = config_path
        self.parameter = parameter

        super().__init__(_with_details(
            message,
            f"in {config_path}" if config_path else None,
            f"parameter '{parameter}'" if parameter else None,
        ))


class ValidationError(TowerFireError):
    """Raised when a record such as an ``IgnitionEvent`` gets an invalid value.

    Attributes:
        field (str): Name of the rejected field, if known.
        value: The rejected value.
    """

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        self.field = field
        self.value = value

        super().__init__(_with_details(
            message,
            f"field '{field}'" if field else None,
            f"value={value!r}" if value is not None else None,
        ))


class GridError(TowerFireError):
    """Raised when an explicit lookup names a floor or cell that does not exist.

    Attributes:
        row (int): Requested row, if applicable.
        col (int): Requested column, if applicable.
    """

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        self.row = row
        self.col = col

        super().__init__(_with_details(
            message,
            f"row={row}" if row is not None else None,
            f"col={col}" if col is not None else None,
        ))
