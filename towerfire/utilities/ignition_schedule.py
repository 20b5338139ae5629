"""Scheduled ignitions applied between simulation ticks.

.. autoclass:: IgnitionSchedule
    :members:
"""

from typing import List, TYPE_CHECKING

from towerfire.base_classes.control_base import ControlClass
from towerfire.utilities.data_classes import IgnitionEvent
from towerfire.utilities.logger_schemas import IgnitionLogEntry

if TYPE_CHECKING:
    from towerfire.fire_simulator.fire import FireSim


class IgnitionSchedule(ControlClass):
    """Applies each configured :class:`IgnitionEvent` once its tick is reached.

    Events sharing a tick are applied in the order they were given, so listing
    the same coordinate twice at one tick drives a chimney breach one floor up.
    """

    def __init__(self, events: List[IgnitionEvent]):
        # Stable sort keeps config order within a tick
        self._pending = sorted(events, key=lambda ev: ev.tick)
        self._applied: List[IgnitionEvent] = []

    def process_state(self, fire: 'FireSim') -> None:
        while self._pending and self._pending[0].tick <= fire.tick:
            event = self._pending.pop(0)
            chimney = fire.is_chimney_ignition(event.floor, event.x, event.y)

            fire.ignite(event.floor, event.x, event.y)
            self._applied.append(event)

            if fire.logger:
                fire.logger.cache_ignition(IgnitionLogEntry(
                    timestamp=fire.tick,
                    floor=event.floor,
                    x=event.x,
                    y=event.y,
                    chimney=chimney
                ))

    @property
    def pending(self) -> List[IgnitionEvent]:
        return list(self._pending)

    @property
    def applied(self) -> List[IgnitionEvent]:
        return list(self._applied)
