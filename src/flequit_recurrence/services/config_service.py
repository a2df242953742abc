"""Configuration service for the flequit-recur command line.

ConfigService is the single owner of ``config.json``. It handles:

- Loading and saving the file under the platformdirs config directory
- Creating a default configuration on first run
- Dot-separated key access (``output.format``, ``preview.count``)
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel

from flequit_recurrence.models.config_models import AppConfig


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("flequit_recurrence"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key (None if unknown)."""
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                return None
            value = getattr(value, part)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and persist it.

        Raises:
            KeyError: If the key does not name a configuration field
            pydantic.ValidationError: If the value is invalid for the field
        """
        parts = key.split(".")
        if self.get(key) is None:
            raise KeyError(f"Unknown configuration key '{key}'")

        config_dict = self.config.model_dump()
        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to its default."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default = json.loads(AppConfig().model_dump_json())
        for part in key.split("."):
            if not isinstance(default, dict) or part not in default:
                raise KeyError(f"Unknown configuration key '{key}'")
            default = default[part]
        self.set(key, default)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
