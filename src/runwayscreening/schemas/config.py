"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class AppConfig(BaseModel):
    """Top-level settings file; each section maps onto a component config."""

    intake: dict[str, Any] | None = None
    scorer: dict[str, Any] | None = None
    evaluation: dict[str, Any] | None = None
    ranking: dict[str, Any] | None = None
    export: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        return {key: value for key, value in self.model_dump(exclude_none=True).items() if value}


def load_config(raw: Any) -> AppConfig:
    """Validate a parsed YAML document; an empty file yields defaults."""
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
