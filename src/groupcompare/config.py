#!/usr/bin/env python3
# src/groupcompare/config.py

import copy
import logging
from typing import Any, Dict, Optional

import yaml

from groupcompare.errors import ConfigurationError

logger = logging.getLogger(__name__)

# canonical groups: x, y, z (aquamarine4 / grey50 are R colour names)
DEFAULT_PALETTE = {"x": "darkred", "y": "darkblue", "z": "#458B74"}

DEFAULT_CONFIG: Dict[str, Any] = {
    "group_col": "group",
    "value_col": "value",
    "panel_col": "panel",
    "y_label": None,
    "palette": DEFAULT_PALETTE,
    "show_legend": False,
    "facet": False,
    "unknown_group": "error",
    "fallback_color": "#7F7F7F",
    "jitter_width": 0.4,
    "point_size": 2,
    "box_width": 0.75,
    "base_size": 16,
    "panel_size": [5, 5],
    "seed": None,
    "dpi": 300,
}

UNKNOWN_GROUP_POLICIES = ("error", "fallback")


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return DEFAULT_CONFIG updated with ``overrides`` (palette merged per key)."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    overrides = dict(overrides or {})

    unknown = sorted(set(overrides) - set(config))
    if unknown:
        raise ConfigurationError(
            f"Unknown config key(s): {unknown}. Valid keys: {sorted(config)}"
        )

    palette = overrides.pop("palette", None)
    if palette:
        config["palette"].update({str(k): v for k, v in palette.items()})
    config.update(overrides)

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    if config["unknown_group"] not in UNKNOWN_GROUP_POLICIES:
        raise ConfigurationError(
            f"unknown_group must be one of {UNKNOWN_GROUP_POLICIES}, "
            f"got {config['unknown_group']!r}"
        )
    if config["jitter_width"] < 0:
        raise ConfigurationError(
            f"jitter_width must be >= 0, got {config['jitter_width']}"
        )
    if len(config["panel_size"]) != 2:
        raise ConfigurationError(
            f"panel_size must be [width, height], got {config['panel_size']}"
        )


def load_config(path: Optional[str] = None, section: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a YAML plot config and merge it over the defaults.

    With ``section`` only that top-level block of the file is read, so a
    script config can keep its own settings next to a ``plot:`` block.
    """
    if path is None:
        return merge_config()
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    if section is not None:
        if section not in raw:
            raise ConfigurationError(f"Section '{section}' not found in {path}")
        raw = raw[section] or {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Section '{section}' in {path} must be a mapping")
    logger.debug("Loaded plot config from %s", path)
    return merge_config(raw)
