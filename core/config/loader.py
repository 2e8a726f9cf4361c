"""
LibCirc Core Config: File Loader
===================================
Reads a CirculationConfig from a JSON document.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from core.config.rules import CirculationConfig

logger = logging.getLogger("libcirc.config")


class ConfigLoadError(Exception):
    """Config file missing, unreadable, or not a valid circulation config."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(
            f"Cannot load circulation config from '{self.path}': "
            f"{type(cause).__name__}: {cause}"
        )


def load_config_file(path: Union[str, Path]) -> CirculationConfig:
    """Parse and validate a JSON config file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigLoadError(path, exc) from exc

    if not isinstance(data, dict):
        raise ConfigLoadError(path, ValueError("top-level JSON must be an object"))

    try:
        config = CirculationConfig.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigLoadError(path, exc) from exc

    logger.info(
        f"Loaded config from {path}: {len(config.titles)} titles, "
        f"{len(config.member_classes)} member classes"
    )
    return config
