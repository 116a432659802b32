import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from luxtronik_stats.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CollectorConfig(BaseModel):
    """Which calculations to publish and how to tag them."""

    model_config = ConfigDict(frozen=True)

    tag_map: dict[str, str] = Field(default_factory=dict)
    point_map: dict[str, int] = Field(default_factory=dict)

    @field_validator("point_map")
    @classmethod
    def offsets_must_not_be_negative(cls, value: dict[str, int]) -> dict[str, int]:
        negative = [name for name, offset in value.items() if offset < 0]
        if negative:
            raise ValueError(f"Negative offsets configured for: {', '.join(negative)}")
        return value


SAMPLE_CONFIG = CollectorConfig(
    tag_map={"pump": "beta"},
    point_map={"flow": 10, "return": 11},
)


def load_collector_config(path: Union[str, Path]) -> CollectorConfig:
    """
    Load the tag and point maps from a JSON file.
    Raises ConfigurationError if the file is missing, unreadable or invalid.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        config = CollectorConfig.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid points configuration {path}: {e}") from e

    logger.info(f"Loaded {len(config.point_map)} points and {len(config.tag_map)} tags from {path}")
    return config


def bootstrap_collector_config(path: Union[str, Path]) -> bool:
    """
    Write the sample configuration if no file exists yet.
    Returns True if a file was written.
    """
    path = Path(path)
    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SAMPLE_CONFIG.model_dump_json(indent=2), encoding="utf-8")
    logger.warning(f"No configuration file found. Wrote sample configuration to {path}")
    return True
