"""Configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigValidationError

DEFAULT_CONFIG_PATH = Path("config/schema.yaml")


class Settings(BaseSettings):
    """Validator settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="JOB_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    verbose: int = 0

    # Boundary parsers
    log_rejections: bool = True

    @field_validator("verbose", mode="before")
    @classmethod
    def _coerce_verbose(cls, v: Any) -> int:
        if isinstance(v, bool):
            return 2 if v else 0
        if isinstance(v, str):
            low = v.strip().lower()
            # Try numeric first so "1", "2", "3" stay as-is
            try:
                return int(low)
            except ValueError:
                pass
            if low in ("true", "yes"):
                return 2
            return 0
        return int(v)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying verbosity (>= 2 forces DEBUG)."""
        if self.verbose >= 2:
            return "DEBUG"
        return self.log_level.upper()


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, treating a missing or empty file as no overrides."""
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file must contain a mapping: {path}")
    return data


def load_settings(path: str | Path | None = None) -> Settings:
    """Build settings from the environment plus optional YAML overrides.

    Raises:
        ConfigValidationError: If the YAML file is malformed or holds invalid values
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    overrides = _load_yaml(path)

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid settings in {path}",
            errors=e.errors(),
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return load_settings()
