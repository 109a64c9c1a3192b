"""Configuration loader for the scheme scraper.

Reads YAML configuration, applies environment variable overrides, and returns typed
dataclasses consumed by the boundary, CLI, and API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    return value


def _merge_dicts(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: Dict[str, Any], prefix: str = "SCRAPE") -> Dict[str, Any]:
    """Override config using env vars like SCRAPE_LIMITS__MAX_SCHEME_DEPTH=16."""
    overrides: Dict[str, Any] = {}
    for env_key, env_val in os.environ.items():
        if not env_key.startswith(prefix + "_"):
            continue
        trimmed = env_key[len(prefix) + 1 :]
        keys = trimmed.lower().split("__")
        if len(keys) < 2:
            continue
        cursor = overrides
        for key in keys[:-1]:
            cursor = cursor.setdefault(key, {})
        cursor[keys[-1]] = _coerce_env_value(env_val)
    return _merge_dicts(config, overrides)


def _coerce_env_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in {"true", "yes"}:
        return True
    if lowered in {"false", "no"}:
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


@dataclass
class ParserSettings:
    features: str = "html.parser"  # html.parser | lxml


@dataclass
class LimitSettings:
    max_scheme_depth: int = 64


@dataclass
class OutputSettings:
    indent: Optional[int] = None
    ensure_ascii: bool = False


@dataclass
class LoggingSettings:
    level: str = "INFO"
    format: str = "%(levelname)s %(message)s"


@dataclass
class Config:
    parser: ParserSettings = field(default_factory=ParserSettings)
    limits: LimitSettings = field(default_factory=LimitSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def load_config(path: Optional[Path | str] = None, env_prefix: str = "SCRAPE") -> Config:
    """Load YAML config and merge env overrides."""
    config_path = Path(path) if path else Path("config.yaml")
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            data = _expand_env(yaml.safe_load(f) or {})
    else:
        data = {}
    merged_dict = _apply_env_overrides(data, prefix=env_prefix)
    return map_dict_to_config(merged_dict)


def map_dict_to_config(data: Dict[str, Any]) -> Config:
    return Config(
        parser=ParserSettings(**data.get("parser", {})),
        limits=LimitSettings(**data.get("limits", {})),
        output=OutputSettings(**data.get("output", {})),
        logging=LoggingSettings(**data.get("logging", {})),
    )


__all__ = [
    "Config",
    "ParserSettings",
    "LimitSettings",
    "OutputSettings",
    "LoggingSettings",
    "load_config",
    "map_dict_to_config",
]
