# tests/application/services/test_export_config.py
from pathlib import Path

import pytest

from application.services.export_config import ExportConfig
from domain.exceptions import ValidationError


def _config(**kwargs):
    values = dict(output_folder="out", class_name="RecordedSimulation", request_bodies_folder="bodies")
    values.update(kwargs)
    return ExportConfig(**values)


class TestExportConfigPaths:
    def test_simulation_path_follows_package(self):
        config = _config(package="com.example.perf")
        assert config.simulation_path() == Path("out") / "com" / "example" / "perf" / "RecordedSimulation.scala"

    def test_simulation_path_without_package(self):
        assert _config().simulation_path() == Path("out") / "RecordedSimulation.scala"

    def test_request_body_path(self):
        assert _config().request_body_path(7) == Path("bodies") / "RecordedSimulation_request_7.txt"


class TestExportConfigValidation:
    @pytest.mark.parametrize("class_name", ["", "1Sim", "My-Sim", "a.b"])
    def test_invalid_class_name(self, class_name):
        with pytest.raises(ValidationError, match="invalid class name"):
            _config(class_name=class_name)

    def test_invalid_package(self):
        with pytest.raises(ValidationError, match="invalid package"):
            _config(package="com..example")

    def test_unknown_encoding(self):
        with pytest.raises(ValidationError, match="unknown encoding"):
            _config(encoding="no-such-codec")

    def test_non_positive_grouping(self):
        with pytest.raises(ValidationError):
            _config(events_grouping=0)

    def test_defaults(self):
        config = _config()
        assert config.encoding == "utf-8"
        assert config.automatic_referer is True
        assert config.events_grouping == 100
        assert config.scenario_name == "Scenario Name"
