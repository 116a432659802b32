import json

import pytest
from pydantic import ValidationError

from luxtronik_stats.domain.configuration import (
    SAMPLE_CONFIG,
    CollectorConfig,
    bootstrap_collector_config,
    load_collector_config,
)
from luxtronik_stats.domain.exceptions import ConfigurationError


class TestCollectorConfig:
    """Test suite for the CollectorConfig model."""

    def test_defaults(self):
        config = CollectorConfig()
        assert config.tag_map == {}
        assert config.point_map == {}

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            CollectorConfig(point_map={"flow": -1})

    def test_non_integer_offset_rejected(self):
        with pytest.raises(ValidationError):
            CollectorConfig(point_map={"flow": "ten"})

    def test_frozen(self):
        config = CollectorConfig(point_map={"flow": 10})
        with pytest.raises(ValidationError):
            config.point_map = {}


class TestLoadCollectorConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"tag_map": {"pump": "beta"}, "point_map": {"flow": 10, "return": 11}}))

        config = load_collector_config(path)

        assert config.tag_map == {"pump": "beta"}
        assert config.point_map == {"flow": 10, "return": 11}

    def test_keeps_file_order(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text('{"point_map": {"z": 3, "a": 1, "m": 2}}')

        assert list(load_collector_config(path).point_map) == ["z", "a", "m"]

    def test_ignores_unknown_keys(self, tmp_path):
        """Files written for the InfluxDB 1.x settings still load."""
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"InfluxHost": "localhost", "point_map": {"flow": 10}}))

        assert load_collector_config(path).point_map == {"flow": 10}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_collector_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_collector_config(path)

    def test_invalid_offsets(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"point_map": {"flow": -3}}))

        with pytest.raises(ConfigurationError):
            load_collector_config(path)


class TestBootstrapCollectorConfig:
    def test_writes_sample(self, tmp_path):
        path = tmp_path / "conf" / "points.json"

        assert bootstrap_collector_config(path) is True
        assert load_collector_config(path) == SAMPLE_CONFIG
        assert SAMPLE_CONFIG.tag_map == {"pump": "beta"}
        assert SAMPLE_CONFIG.point_map == {"flow": 10, "return": 11}

    def test_keeps_existing_file(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"point_map": {"flow": 1}}))

        assert bootstrap_collector_config(path) is False
        assert load_collector_config(path).point_map == {"flow": 1}
