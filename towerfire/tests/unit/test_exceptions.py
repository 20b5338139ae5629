"""Tests for the towerfire exception hierarchy."""

import pytest
from towerfire.exceptions import ConfigurationError, GridError, TowerFireError, ValidationError


class TestExceptionMessages:
    """Tests for the detail suffixes added to exception messages."""

    def test_configuration_error_details(self):
        err = ConfigurationError("Bad width", config_path="tower.cfg", parameter="width")

        assert str(err) == "Bad width (in tower.cfg, parameter 'width')"
        assert err.config_path == "tower.cfg"
        assert err.parameter == "width"

    def test_no_details(self):
        assert str(ConfigurationError("Missing file")) == "Missing file"

    def test_validation_error_keeps_falsy_value(self):
        err = ValidationError("Negative tick", field="tick", value=0)
        assert str(err) == "Negative tick (field 'tick', value=0)"

    def test_grid_error_zero_indices(self):
        assert str(GridError("Out of range", row=0, col=7)) == "Out of range (row=0, col=7)"

    @pytest.mark.parametrize("err", [
        ConfigurationError("x"), ValidationError("x"), GridError("x")
    ])
    def test_common_base(self, err):
        assert isinstance(err, TowerFireError)
