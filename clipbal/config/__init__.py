"""
Configuration loading for Clipboard Balancer.
"""

from __future__ import annotations

from .load import CONFIG_FILE_NAME, build_classifier, config_path, load_config
from .model import BalanceConfig, ConfigLoadError, StyleCfg

__all__ = [
    "CONFIG_FILE_NAME",
    "BalanceConfig",
    "ConfigLoadError",
    "StyleCfg",
    "build_classifier",
    "config_path",
    "load_config",
]
