"""Loader settings.

Simple, scope-aware YAML settings with environment overrides.

Scope priority (most specific wins):
1. Environment (ESM_LOADER_LOG_LEVEL, ESM_LOADER_LOG_PATH, ESM_LOADER_SEARCH_PATHS)
2. project (.esm-loader/settings.yaml)
3. global (~/.esm-loader/settings.yaml)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import Field

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "ESM_LOADER_LOG_LEVEL"
ENV_LOG_PATH = "ESM_LOADER_LOG_PATH"
# Comma-separated; os.pathsep would collide with the ':' in URIs
ENV_SEARCH_PATHS = "ESM_LOADER_SEARCH_PATHS"


class LoaderSettings(BaseModel):
    """Effective loader configuration.

    Attributes:
        search_paths: Extra search bases, probed after the defaults
        include_default_search_paths: Whether the built-in ESM and core bases come first
        log_level: Root log level for the JSONL sink
        log_path: JSONL log file (None disables file logging)
    """

    search_paths: list[str] = Field(default_factory=list)
    include_default_search_paths: bool = True
    log_level: str = "INFO"
    log_path: str | None = None


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        return cls(
            global_settings=Path.home() / ".esm-loader" / "settings.yaml",
            project_settings=Path.cwd() / ".esm-loader" / "settings.yaml",
        )


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, overlay wins."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            content = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        return {}
    if not isinstance(content, dict):
        logger.warning(f"Ignoring {path}: expected a mapping, got {type(content).__name__}")
        return {}
    return content


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if level := environ.get(ENV_LOG_LEVEL):
        overrides["log_level"] = level
    if path := environ.get(ENV_LOG_PATH):
        overrides["log_path"] = path
    if bases := environ.get(ENV_SEARCH_PATHS):
        overrides["search_paths"] = [b.strip() for b in bases.split(",") if b.strip()]
    return overrides


def load_settings(paths: SettingsPaths | None = None, environ: Mapping[str, str] | None = None) -> LoaderSettings:
    """Load and merge settings from all scopes.

    Args:
        paths: Settings file locations (default: SettingsPaths.default())
        environ: Environment mapping (default: os.environ)

    Returns:
        LoaderSettings

    Raises:
        pydantic.ValidationError: Merged settings have the wrong shape
    """
    paths = paths or SettingsPaths.default()
    merged: dict[str, Any] = {}
    for path in [paths.global_settings, paths.project_settings]:
        merged = _deep_merge(merged, _read_yaml(path))
    merged = _deep_merge(merged, _env_overrides(os.environ if environ is None else environ))

    settings = LoaderSettings(**merged)
    settings.log_level = settings.log_level.upper()
    return settings
