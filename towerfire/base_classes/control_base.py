"""Abstract control class for code that acts on the simulation between ticks.

Users extend ControlClass to implement logic that reads the building state
and may call ``ignite`` or ``reset`` after each tick. Running this logic
between ticks keeps those calls from interleaving with ``update()``.

Classes:
    - ControlClass: Abstract base for between-tick collaborators.

.. autoclass:: ControlClass
    :members:
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from towerfire.fire_simulator.fire import FireSim

class ControlClass(ABC):
    """Abstract base class for user-defined between-tick control code.

    Subclasses must implement the process_state method, which is called
    after each simulation tick.
    """

    @abstractmethod
    def process_state(self, fire: 'FireSim') -> None:
        """Process the current simulation state and apply actions.

        Called after each simulation tick. Implement this method to read the
        building via fire.floors, fire.field_array(), fire.get_stats(), etc.
        and to call fire.ignite() or fire.reset().

        Args:
            fire (FireSim): The current FireSim instance.
        """
