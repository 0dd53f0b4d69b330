"""
Loader of the field configuration file (fields.yaml).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigLoadError, SmartInputError
from .model import FieldsConfig

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file and returns its top-level mapping."""
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"YAML must be a mapping: {path}")
    return raw


def load_fields_config(path: Path | str) -> FieldsConfig:
    """
    Load and check a field configuration file.

    Every field is resolved once here (preset and validator built) so a bad
    option is reported at load time, not on the first keystroke.
    """
    path = Path(path)
    raw = _read_yaml_map(path)
    try:
        cfg = FieldsConfig.from_dict(raw)
        for name in cfg.fields:
            cfg.build(name)
    except (SmartInputError, ValueError) as e:
        raise ConfigLoadError(f"{path}: {e}") from e
    logger.info("Loaded %d field(s) from %s", len(cfg.fields), path)
    return cfg


__all__ = ["load_fields_config"]
