"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed settings loader.

    Named configs resolve to ``<base_path>/<name>.yaml``; explicit files can be
    read with :meth:`load_file`.
    """

    def __init__(self, base_path: str | Path = "."):
        self._base_path = Path(base_path)

    def load(self, name: str) -> AppConfig:
        """Load a YAML configuration by name without file extension."""
        return self.load_file(self._base_path / f"{name}.yaml")

    def load_file(self, path: str | Path) -> AppConfig:
        return load_config(self._read(Path(path)))

    @staticmethod
    def _read(path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)


def load_settings(path: str | Path | None) -> dict[str, Any]:
    """Return container settings from an optional YAML file."""
    if path is None:
        return {}
    return ConfigManager().load_file(path).to_settings()


__all__ = ["ConfigManager", "load_settings"]
