"""Configuration management for textanalyser."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import yaml

from .core.analysis_runner import ANALYSER_KEYS
from .core.word_reader import DEFAULT_ENCODING

DEFAULT_ANALYSERS = ["chars", "words"]


class ConfigError(ValueError):
    """Raised when a config file cannot be interpreted."""


def get_default_config_path() -> Path:
    """Get the default config path."""
    return Path.home() / ".textanalyser" / "config.yaml"


def _string_list(data: dict[str, Any], key: str, default: list[str]) -> list[str]:
    """Read a list of strings, accepting a single string as a one-item list.

    An empty value falls back to the default.

    Raises:
        ConfigError: If the value is neither a string nor a list of strings
    """
    value = data.get(key)
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a string or a list of strings")
    return list(value)


@dataclass
class Config:
    """Main configuration for textanalyser."""

    encoding: str = DEFAULT_ENCODING
    dictionaries: list[str] = field(default_factory=list)
    analysers: list[str] = field(default_factory=lambda: list(DEFAULT_ANALYSERS))
    log_level: str = "WARNING"

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        analysers = _string_list(data, "analysers", DEFAULT_ANALYSERS)
        unknown = [key for key in analysers if key not in ANALYSER_KEYS]
        if unknown:
            raise ConfigError(f"Unknown analyser(s) in config: {', '.join(unknown)}")

        return cls(
            encoding=data.get("encoding") or DEFAULT_ENCODING,
            dictionaries=[
                str(Path(p).expanduser()) for p in _string_list(data, "dictionaries", [])
            ],
            analysers=analysers,
            log_level=str(data.get("log_level") or "WARNING").upper(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "encoding": self.encoding,
            "dictionaries": self.dictionaries,
            "analysers": self.analysers,
            "log_level": self.log_level,
        }

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load configuration from a YAML file.

        Raises:
            OSError: If the file cannot be read
            ConfigError: If the file is not valid YAML or not a mapping
        """
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls.default()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        """Save configuration to a YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.to_dict(), f,
                default_flow_style=False, sort_keys=False, allow_unicode=True
            )
