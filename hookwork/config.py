"""Configuration models and loading for hookwork engines."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict

from hookwork.models import ArityPolicy


class HookEngineConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    arity_policy: ArityPolicy = ArityPolicy.REJECT
    default_priority: int = 10
    require_typed_parameters: bool = False


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_effective_config(
    config_path: str | Path | None = None,
    defaults: dict[str, Any] | None = None,
    runtime_override: dict[str, Any] | None = None,
) -> HookEngineConfig:
    """Load config with precedence runtime > YAML file > defaults."""
    merged: dict[str, Any] = {}
    if defaults:
        merged = _deep_merge(merged, defaults)
    if config_path is not None:
        merged = _deep_merge(merged, _load_yaml(Path(config_path)))
    if runtime_override:
        merged = _deep_merge(merged, runtime_override)

    return HookEngineConfig.model_validate(merged)
