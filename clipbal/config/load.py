from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..lexical import get_classifier
from ..lexical.comment_style import LexicalStyle
from ..lexical.model import Classifier
from ..lexical.style import StyleClassifier
from .model import BalanceConfig, ConfigLoadError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

CONFIG_FILE_NAME = ".clipbal.yaml"


def config_path(root: Path) -> Path:
    return root / CONFIG_FILE_NAME


def _read_yaml_map(path: Path) -> dict:
    """Reads YAML file and returns a mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path}: YAML must be a mapping")
    return raw


def load_config(path: Optional[Path] = None, root: Optional[Path] = None) -> BalanceConfig:
    """
    Load balance settings.

    Args:
        path: Explicit config file; must exist
        root: Directory searched for .clipbal.yaml when no path is given (cwd by default)

    Returns:
        BalanceConfig (defaults when no file is found)
    """
    if path is not None:
        if not path.is_file():
            raise ConfigLoadError(f"Config file not found: {path}")
    else:
        path = config_path(root or Path.cwd())
        if not path.is_file():
            logger.debug("no %s, using defaults", path)
            return BalanceConfig()

    logger.debug("loading config from %s", path)
    raw = _read_yaml_map(path)
    try:
        return BalanceConfig.from_dict(raw)
    except ConfigLoadError as e:
        raise ConfigLoadError(f"{path}: {e}") from e


def build_classifier(cfg: BalanceConfig, language: Optional[str] = None) -> Classifier:
    """
    Classifier for a config; an explicit language overrides the config's.

    A custom style in the config is used unless a language is given explicitly.
    """
    if cfg.style is not None and language is None:
        style = LexicalStyle.from_dict(cfg.style.to_dict(), escape_char=cfg.escape_char)
        return StyleClassifier(style)

    classifier = get_classifier(language or cfg.language or "plain")
    classifier.escape_char = cfg.escape_char
    return classifier
