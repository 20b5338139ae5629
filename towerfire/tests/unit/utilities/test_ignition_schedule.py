"""Tests for scheduled ignitions and the between-tick control interface."""

import pytest
from unittest.mock import MagicMock
from towerfire.base_classes.control_base import ControlClass
from towerfire.exceptions import ValidationError
from towerfire.utilities.data_classes import IgnitionEvent
from towerfire.utilities.fire_util import PhysicsConstants as pc
from towerfire.utilities.ignition_schedule import IgnitionSchedule

X, Y = 10, 3


class TestIgnitionEvent:
    """Tests for ignition event validation."""

    @pytest.mark.parametrize("tick,floor", [(-1, 0), (0, -1), (1.5, 0), (0, "1")])
    def test_invalid_values(self, tick, floor):
        with pytest.raises(ValidationError):
            IgnitionEvent(tick=tick, floor=floor, x=X, y=Y)

    def test_coordinates_not_validated(self):
        """Out-of-building coordinates are left for ignite() to ignore."""
        event = IgnitionEvent(tick=0, floor=0, x=-5, y=500)
        assert event.x == -5


class TestIgnitionSchedule:
    """Tests for applying ignitions once their tick is reached."""

    def test_applies_due_events_only(self, small_fire):
        schedule = IgnitionSchedule([
            IgnitionEvent(tick=2, floor=1, x=X, y=Y),
            IgnitionEvent(tick=0, floor=0, x=X, y=Y),
        ])

        schedule.process_state(small_fire)

        assert small_fire.floors[0][Y][X].fire == 1.0
        assert small_fire.floors[1][Y][X].fire == 0
        assert len(schedule.applied) == 1
        assert len(schedule.pending) == 1

        small_fire.update()
        schedule.process_state(small_fire)
        assert len(schedule.pending) == 1

        small_fire.update()
        schedule.process_state(small_fire)
        assert small_fire.floors[1][Y][X].fire == 1.0
        assert schedule.pending == []

    def test_same_tick_keeps_order(self, small_fire):
        """Two ignitions at one position and tick drive fire up one floor."""
        schedule = IgnitionSchedule([
            IgnitionEvent(tick=0, floor=0, x=X, y=Y),
            IgnitionEvent(tick=0, floor=0, x=X, y=Y),
        ])

        schedule.process_state(small_fire)

        assert small_fire.floors[1][Y][X].temperature == pc.MAX_TEMP
        assert small_fire.floors[2][Y][X].fire == 0

    def test_late_schedule_catches_up(self, small_fire):
        for _ in range(3):
            small_fire.update()

        schedule = IgnitionSchedule([IgnitionEvent(tick=1, floor=0, x=X, y=Y)])
        schedule.process_state(small_fire)

        assert schedule.pending == []

    def test_logs_ignitions(self, small_fire):
        logger = MagicMock()
        small_fire.set_logger(logger)
        schedule = IgnitionSchedule([
            IgnitionEvent(tick=0, floor=0, x=X, y=Y),
            IgnitionEvent(tick=0, floor=0, x=X, y=Y),
        ])

        schedule.process_state(small_fire)

        entries = [c.args[0] for c in logger.cache_ignition.call_args_list]
        assert [e.chimney for e in entries] == [False, True]
        assert entries[0].floor == 0 and entries[0].x == X and entries[0].y == Y

    def test_empty_schedule(self, small_fire):
        schedule = IgnitionSchedule([])
        schedule.process_state(small_fire)

        assert schedule.applied == []


class TestControlClass:
    """Tests for the abstract control interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            ControlClass()

    def test_subclass_can_ignite(self, small_fire):
        class Arsonist(ControlClass):
            def process_state(self, fire):
                if fire.tick == 0:
                    fire.ignite(0, X, Y)

        Arsonist().process_state(small_fire)

        assert small_fire.floors[0][Y][X].fire == 1.0
