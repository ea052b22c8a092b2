"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from aicommit import DEFAULT_MAX_DIFF_CHARS
from aicommit.i18n import SUPPORTED_LANGUAGES, normalize_language


@dataclass
class Config:
    """User configuration with sensible defaults."""
    language: str = "EN"
    model: Optional[str] = None
    agent_command: str = "claude"
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS
    agent_timeout: int = 300

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        language = normalize_language(self.language) if isinstance(self.language, str) else None
        if language is None:
            warnings.append(
                f"Invalid language '{self.language}', expected one of "
                f"{', '.join(SUPPORTED_LANGUAGES)}; using '{defaults.language}'"
            )
            self.language = defaults.language
        else:
            self.language = language

        if not isinstance(self.agent_command, str) or not self.agent_command.strip():
            warnings.append(f"Invalid agent_command '{self.agent_command}', using '{defaults.agent_command}'")
            self.agent_command = defaults.agent_command

        if not isinstance(self.max_diff_chars, int) or self.max_diff_chars <= 0:
            warnings.append(f"Invalid max_diff_chars '{self.max_diff_chars}', using {defaults.max_diff_chars}")
            self.max_diff_chars = defaults.max_diff_chars

        if not isinstance(self.agent_timeout, int) or self.agent_timeout <= 0:
            warnings.append(f"Invalid agent_timeout '{self.agent_timeout}', using {defaults.agent_timeout}")
            self.agent_timeout = defaults.agent_timeout

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration from ./.aicommitrc, then ~/.aicommitrc."""

    CONFIG_FILENAME = ".aicommitrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            return Config.from_dict(data)
        except (ValueError, OSError) as e:  # JSONDecodeError is a ValueError
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

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
    "load_config",
    "get_config_path",
]
