"""Persisted build configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_DEFAULT_CONFIG_FILE = "multi_catalog.json"


class BuildConfig(BaseModel):
    """Multi-catalog settings that survive between builds.

    ``catalog_groups`` lists the groups split into their own catalog, in priority
    order; leave it empty for one catalog per group. ``produced_artifacts`` holds the
    ``<build path>/<group name>`` prefixes written by the last build and is only read
    when cleaning.
    """

    catalog_groups: list[str] = Field(default_factory=list)
    produced_artifacts: list[str] = Field(default_factory=list)


def default_config_path() -> Path:
    return Path(os.getenv("MULTI_CATALOG_CONFIG", _DEFAULT_CONFIG_FILE))


def load_build_config(path: str | Path | None = None) -> BuildConfig:
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return BuildConfig()
    return BuildConfig.model_validate_json(config_path.read_text(encoding="utf-8"))


def save_build_config(config: BuildConfig, path: str | Path | None = None) -> Path:
    config_path = Path(path) if path is not None else default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return config_path
