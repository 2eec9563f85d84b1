"""Configuration Management Package"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Environment variable -> (config field, converter)
ENV_OVERRIDES = {
    "CCAI_MODEL": ("model", str),
    "CCAI_TIMEOUT": ("timeout", float),
    "CCAI_LOG_COUNT": ("log_count", int),
    "CCAI_LOG_LEVEL": ("log_level", str.upper),
}


@dataclass
class Config:
    """User configuration with sensible defaults.

    The API key is not stored here; the client reads OPENAI_API_KEY.
    """
    model: str = "gpt-4.1"
    timeout: float = 60.0
    log_count: int = 30
    log_level: str = "WARNING"

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            warnings.append(f"Invalid timeout '{self.timeout}', using {defaults.timeout}")
            self.timeout = defaults.timeout

        if isinstance(self.log_count, bool) or not isinstance(self.log_count, int) or self.log_count <= 0:
            warnings.append(f"Invalid log_count '{self.log_count}', using {defaults.log_count}")
            self.log_count = defaults.log_count

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            warnings.append(f"Invalid log_level '{self.log_level}', using '{defaults.log_level}'")
            self.log_level = defaults.log_level
        else:
            self.log_level = self.log_level.upper()

        return warnings

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        _report(config.validate())
        return config


def _report(warnings: list[str]) -> None:
    for warning in warnings:
        print(f"Config warning: {warning}", file=sys.stderr)


def apply_env_overrides(config: Config, environ=None) -> Config:
    """Apply CCAI_* environment variables on top of file/default values."""
    environ = os.environ if environ is None else environ
    warnings = []
    for var, (field_name, convert) in ENV_OVERRIDES.items():
        raw = environ.get(var)
        if not raw:
            continue
        try:
            setattr(config, field_name, convert(raw))
        except ValueError:
            warnings.append(f"Ignoring {var}={raw!r}: not a valid {field_name}")
    warnings.extend(config.validate())
    _report(warnings)
    return config


class ConfigManager:
    """Loads configuration from .ccairc (cwd, then home) and the environment."""

    CONFIG_FILENAME = ".ccairc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        config = Config()
        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                config = self._load_from_file(path)
                self._config_path = path
                break

        self._config = apply_env_overrides(config)
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "apply_env_overrides",
    "load_config",
    "get_config_path",
    "ENV_OVERRIDES",
    "VALID_LOG_LEVELS",
]
