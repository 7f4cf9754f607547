"""Global configuration storage for Pointlist.

Stores user preferences in ~/.pointlist/config.json. Set POINTLIST_HOME
to use a different directory.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from .domain.shared.result import Err, Ok, Result
from .domain.task import EditMode
from .infrastructure.storage import JsonStorage

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


class AppConfig(BaseModel):
    """User preferences."""

    edit_mode: EditMode = EditMode.INDEPENDENT
    log_level: str = "WARNING"
    seed_file: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def get_config_dir() -> Path:
    """Get the Pointlist config directory."""
    override = os.environ.get("POINTLIST_HOME")
    config_dir = Path(override) if override else Path.home() / ".pointlist"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_global_config() -> AppConfig:
    """Load the global configuration, falling back to defaults."""
    config_file = get_config_dir() / CONFIG_FILE_NAME
    if not config_file.exists():
        return AppConfig()

    result = JsonStorage().load_json(config_file)
    if isinstance(result, Err):
        logger.warning("Ignoring config file: %s", result.error)
        return AppConfig()
    try:
        return AppConfig(**result.value)
    except (TypeError, ValidationError) as e:
        logger.warning("Ignoring invalid config in %s: %s", config_file, e)
        return AppConfig()


def save_global_config(config: AppConfig) -> Result[None, str]:
    """Save the global configuration."""
    config_file = get_config_dir() / CONFIG_FILE_NAME
    return JsonStorage().save_json(config_file, config.model_dump(mode="json"))


def update_global_config(key: str, value: str) -> Result[AppConfig, str]:
    """Set a single config key from its string form and save.

    An empty value resets the key to its default.
    """
    if key not in AppConfig.model_fields:
        return Err(f"Unknown config key: {key}")

    data = get_global_config().model_dump()
    if value == "":
        data.pop(key)
    else:
        data[key] = value
    try:
        config = AppConfig(**data)
    except ValidationError as e:
        return Err(f"Invalid value for {key}: {e.errors()[0]['msg']}")

    saved = save_global_config(config)
    if isinstance(saved, Err):
        return saved
    return Ok(config)
