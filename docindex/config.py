"""
Configuration defaults and loading utilities for docindex.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "idx")

DEFAULT_CONFIG: dict[str, Any] = {
    # How index files are read
    "input": {
        "encoding": "utf-8",
    },

    # How parsed entries are printed by the CLI
    "output": {
        "format": "json",   # "json" or "idx"
        "sort": False,      # sort keyword/link style-insensitively
        "indent": 2,        # JSON indentation
    },
}


def load_config(config_path: Path) -> dict[str, Any]:
    """
    Load configuration from YAML file, merged with defaults.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Configuration dictionary with user values merged over defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file is not a mapping or names an unknown
            output format.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        user_config = yaml.safe_load(f) or {}

    if not isinstance(user_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    # Deep merge with defaults
    config = DEFAULT_CONFIG.copy()
    for key, value in user_config.items():
        if isinstance(value, dict) and key in config and isinstance(config[key], dict):
            config[key] = {**config[key], **value}
        else:
            if key not in DEFAULT_CONFIG:
                logger.warning("Unknown config section %r in %s", key, config_path)
            config[key] = value

    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            raise ValueError(f"Config section {section!r} in {config_path} must be a mapping")

    output_format = config["output"].get("format")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    logger.debug("Loaded config from %s", config_path)
    return config


def get_config_template() -> str:
    """Generate a commented YAML config template."""
    return '''# =============================================================================
# docindex configuration
# =============================================================================
# Usage:
#   docindex --config docindex.yaml path/to/unit.idx
# =============================================================================

# -----------------------------------------------------------------------------
# INPUT
# -----------------------------------------------------------------------------
input:
  encoding: utf-8       # index files are UTF-8 text

# -----------------------------------------------------------------------------
# OUTPUT
# -----------------------------------------------------------------------------
# format: json  - one object per entry, including the derived "module"
# format: idx   - entries re-serialized as index file lines
# sort: true    - order by keyword then link, ignoring case and underscores
# -----------------------------------------------------------------------------
output:
  format: json
  sort: false
  indent: 2
'''
