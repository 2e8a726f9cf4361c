"""
LibCirc Core Config: Public API
==================================
Configurable circulation rules (catalog stock, member limits, late fee).
Doctrine: No hardcoded titles or limits in engine logic.
"""

from core.config.loader import ConfigLoadError, load_config_file
from core.config.rules import (
    DEFAULT_CONFIG,
    CirculationConfig,
    ConfigStore,
    InMemoryConfigStore,
    MemberClassRule,
    TitleRule,
)

__all__ = [
    "DEFAULT_CONFIG",
    "CirculationConfig",
    "TitleRule",
    "MemberClassRule",
    "ConfigStore",
    "InMemoryConfigStore",
    "ConfigLoadError",
    "load_config_file",
]
