"""Configuration loader — dagscope.yml parsing and defaults."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from dagscope.logger import logger
from dagscope.model import DagScopeConfig


def load_config(path: Path | None = None) -> DagScopeConfig:
    """Load config from YAML file, or return defaults if no path given."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return DagScopeConfig()

    p = Path(path)

    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return DagScopeConfig()
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return DagScopeConfig()

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return DagScopeConfig()

    if raw is None:
        logger.debug("Config file %s is empty, using defaults", path)
        return DagScopeConfig()

    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return DagScopeConfig()

    try:
        return DagScopeConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
        return DagScopeConfig()
