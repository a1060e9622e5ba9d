"""Runtime settings for the MedAssist service."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_ENV_PREFIX = "MEDASSIST_"
_TRUTHY = {"1", "true", "yes", "on"}
_BOOL_FIELDS = {"test_mode", "log_to_file"}


class Settings(BaseModel):
    test_mode: bool = False
    reply_delay_s: float = 1.0
    analysis_delay_s: float = 3.0
    user_name: str = "John"
    timezone: str = "UTC"
    state_dir: Path = Field(default_factory=lambda: Path.home() / ".medassist")

    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Optional[Path] = None
    log_max_bytes: int = Field(default=5_000_000, gt=0)
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator("reply_delay_s", "analysis_delay_s")
    @classmethod
    def validate_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError("delays must be >= 0 seconds")
        return value

    @field_validator("state_dir", "log_dir", mode="before")
    @classmethod
    def expand_paths(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Path(value).expanduser()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @property
    def log_path(self) -> Path:
        return (self.log_dir or self.state_dir / "logs") / "medassist.log"


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
        if raw is None or raw.strip() == "":
            continue
        if name in _BOOL_FIELDS:
            overrides[name] = raw.strip().casefold() in _TRUTHY
        else:
            overrides[name] = raw.strip()
    return overrides


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return data


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from an optional YAML file, then apply MEDASSIST_* env vars."""
    cfg_path = path or os.getenv(f"{_ENV_PREFIX}CONFIG")
    data: dict[str, Any] = _load_yaml(Path(cfg_path)) if cfg_path else {}
    data.update(_env_overrides())
    return Settings.model_validate(data)
