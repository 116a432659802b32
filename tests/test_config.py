"""Tests for the configuration module."""

import pytest
from pydantic import SecretStr, ValidationError

from luxtronik_stats.config import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(Settings.model_fields):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    """Test that all settings have sensible defaults."""

    def test_general_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.COLLECTOR_MODE == "production"

    def test_luxtronik_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.LUXTRONIK_HOST == ""
        assert settings.LUXTRONIK_PORT == 8888
        assert settings.LUXTRONIK_LOCAL_IP == ""
        assert settings.LUXTRONIK_TIMEOUT == 10.0
        assert settings.POLL_INTERVAL_MINUTES == 1
        assert settings.poll_interval_seconds == 60
        assert settings.POINTS_CONFIG_FILE == "points.json"

    def test_influxdb_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.INFLUXDB_URL == "http://influxdb:8086"
        assert settings.INFLUXDB_ORG == "home"
        assert settings.INFLUXDB_DATABASE == "heatpump"
        assert isinstance(settings.INFLUXDB_TOKEN, SecretStr)
        assert isinstance(settings.INFLUXDB_PASSWORD, SecretStr)


class TestSettingsEnvironment:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LUXTRONIK_HOST", "192.0.2.10")
        monkeypatch.setenv("LUXTRONIK_PORT", "8889")
        monkeypatch.setenv("POLL_INTERVAL_MINUTES", "5")

        settings = Settings(_env_file=None)

        assert settings.LUXTRONIK_HOST == "192.0.2.10"
        assert settings.LUXTRONIK_PORT == 8889
        assert settings.poll_interval_seconds == 300

    def test_poll_interval_below_one_minute_rejected(self, monkeypatch):
        monkeypatch.setenv("POLL_INTERVAL_MINUTES", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LUXTRONIK_HOST=192.0.2.20\nUNRELATED=1\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.LUXTRONIK_HOST == "192.0.2.20"


class TestInfluxDBCredentials:
    def test_token_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("INFLUXDB_TOKEN", "secret-token")
        monkeypatch.setenv("INFLUXDB_USER", "collector")
        monkeypatch.setenv("INFLUXDB_BUCKET", "heatpump_raw")

        settings = Settings(_env_file=None)

        assert settings.influxdb_token() == "secret-token"
        assert settings.influxdb_bucket() == "heatpump_raw"

    def test_v1_credentials_fallback(self, monkeypatch):
        monkeypatch.setenv("INFLUXDB_USER", "collector")
        monkeypatch.setenv("INFLUXDB_PASSWORD", "pw")
        monkeypatch.setenv("INFLUXDB_DATABASE", "heatpump")

        settings = Settings(_env_file=None)

        assert settings.influxdb_token() == "collector:pw"
        assert settings.influxdb_bucket() == "heatpump"
