"""
Field configuration: which preset and validator each form field uses.
"""

from __future__ import annotations

from .load import load_fields_config
from .model import FieldCfg, FieldsConfig, FieldSpec, ValidatorCfg

__all__ = [
    "load_fields_config",
    "FieldCfg",
    "FieldsConfig",
    "FieldSpec",
    "ValidatorCfg",
]
