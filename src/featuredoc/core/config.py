#!/usr/bin/env python3
"""
FEATUREDOC CONFIG
-----------------
Optional project settings, read from a YAML file (default:
.featuredoc.yaml next to the manifest).

Example:
    feature_label: "<span class=\"stab portability\"><code>{feature}</code></span>"
    start_marker: "<!-- featuredoc:start -->"
    end_marker: "<!-- featuredoc:end -->"

Author: FeatureDoc Team
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML, YAMLError

from featuredoc.core.errors import ConfigError
from featuredoc.extraction.renderer import DEFAULT_MARKER, LABEL_PLACEHOLDER

logger = logging.getLogger("featuredoc.config")

CONFIG_FILE_NAME = ".featuredoc.yaml"


@dataclass(frozen=True)
class FeatureDocConfig:
    manifest_name: str = "Cargo.toml"
    feature_label: Optional[str] = None
    default_marker: str = DEFAULT_MARKER
    start_marker: str = "<!-- featuredoc:start -->"
    end_marker: str = "<!-- featuredoc:end -->"

    def __post_init__(self):
        if self.feature_label is not None and LABEL_PLACEHOLDER not in self.feature_label:
            raise ConfigError(f"feature_label must contain {LABEL_PLACEHOLDER}: {self.feature_label!r}")
        if not self.start_marker or not self.end_marker or self.start_marker == self.end_marker:
            raise ConfigError("start_marker and end_marker must be distinct, non-empty strings")

    def override(self, **values: Any) -> "FeatureDocConfig":
        """Returns a copy with every non-None value applied (CLI flags)."""
        changes = {k: v for k, v in values.items() if v is not None}
        return replace(self, **changes) if changes else self


def _from_mapping(data: Dict[str, Any], source: Path) -> FeatureDocConfig:
    known = {f.name for f in fields(FeatureDocConfig)}
    unknown = sorted(map(str, set(data) - known))
    if unknown:
        raise ConfigError(f"Unknown keys in {source}: {', '.join(unknown)}")
    for key, value in data.items():
        if value is None and key == "feature_label":
            continue
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' in {source} must be a string")
    return FeatureDocConfig(**data)


def load_config(path: Optional[Path], required: bool = False) -> FeatureDocConfig:
    """
    Loads settings from a YAML file. A missing file means defaults,
    unless the caller named it explicitly (required=True).
    """
    if path is None or not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return FeatureDocConfig()

    yaml = YAML(typ='safe')
    try:
        data = yaml.load(path.read_text(encoding='utf-8-sig'))
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    if data is None:
        return FeatureDocConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    logger.info(f"Loaded config from {path}")
    return _from_mapping(data, path)
