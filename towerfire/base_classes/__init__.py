"""Base classes for the towerfire simulation framework.

Classes:
    - BaseFireSim: Floor stack, random source, ignition and reset.
    - GridManager: Manages the cell grid of a single floor.
    - ControlClass: Abstract base for between-tick collaborators.

.. autoclass:: towerfire.base_classes.base_fire.BaseFireSim
    :members:

.. autoclass:: towerfire.base_classes.grid_manager.GridManager
    :members:

.. autoclass:: towerfire.base_classes.control_base.ControlClass
    :members:
"""

from towerfire.base_classes.base_fire import BaseFireSim
from towerfire.base_classes.grid_manager import GridManager
from towerfire.base_classes.control_base import ControlClass

__all__ = [
    "BaseFireSim",
    "GridManager",
    "ControlClass",
]
