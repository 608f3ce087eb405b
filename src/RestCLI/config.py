"""Settings file loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a settings file is unreadable or invalid."""


@dataclass
class Settings:
    indent_width: int = 2
    yes_word: str = "yes"
    no_word: str = "no"
    root: str = "/"
    filters: list[str] = field(default_factory=list)

    @property
    def yes_no(self) -> tuple[str, str]:
        return (self.yes_word, self.no_word)


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file. Missing keys keep their defaults.

    Example:
        indent_width: 4
        root: /languages
        filters:
          - applications
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except OSError as exc:
        raise ConfigError(f"Load config {path} fail: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Load config {path} fail: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    settings = Settings(**data)
    _validate(settings, path)
    logger.debug("Loaded settings from %s", path)
    return settings


def _validate(settings: Settings, path: str | Path) -> None:
    if isinstance(settings.indent_width, bool) or not isinstance(settings.indent_width, int):
        raise ConfigError(f"{path}: indent_width must be an integer")
    if settings.indent_width < 1:
        raise ConfigError(f"{path}: indent_width must be at least 1")
    for name in ("yes_word", "no_word", "root"):
        if not isinstance(getattr(settings, name), str):
            raise ConfigError(f"{path}: {name} must be a string")
    if not isinstance(settings.filters, list) or not all(
        isinstance(p, str) for p in settings.filters
    ):
        raise ConfigError(f"{path}: filters must be a list of strings")
