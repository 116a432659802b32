from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = "INFO"
    COLLECTOR_MODE: str = "production"

    # Luxtronik controller
    LUXTRONIK_HOST: str = ""
    LUXTRONIK_PORT: int = 8888
    LUXTRONIK_LOCAL_IP: str = ""
    LUXTRONIK_TIMEOUT: float = 10.0
    POLL_INTERVAL_MINUTES: int = Field(default=1, ge=1)

    # Tag and point maps (JSON)
    POINTS_CONFIG_FILE: str = "points.json"

    # InfluxDB 2.x
    INFLUXDB_URL: str = "http://influxdb:8086"
    INFLUXDB_TOKEN: SecretStr = SecretStr("")
    INFLUXDB_ORG: str = "home"
    INFLUXDB_BUCKET: str = ""

    # InfluxDB 1.x (v1 compatibility API, used when no token is set)
    INFLUXDB_USER: str = ""
    INFLUXDB_PASSWORD: SecretStr = SecretStr("")
    INFLUXDB_DATABASE: str = "heatpump"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def poll_interval_seconds(self) -> int:
        return self.POLL_INTERVAL_MINUTES * 60

    def influxdb_token(self) -> str:
        token = self.INFLUXDB_TOKEN.get_secret_value()
        if token:
            return token
        return f"{self.INFLUXDB_USER}:{self.INFLUXDB_PASSWORD.get_secret_value()}"

    def influxdb_bucket(self) -> str:
        return self.INFLUXDB_BUCKET or self.INFLUXDB_DATABASE


settings = Settings()
