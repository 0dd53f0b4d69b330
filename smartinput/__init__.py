"""
smart-input: keystroke-level formatting for form fields.

A host text field hands every edit to a FormatterChain as
(old value, candidate value) and shows whatever comes back.
"""

from __future__ import annotations

from .chain import FormatterChain, simulate_typing
from .errors import ConfigLoadError, FormatterConfigError, SmartInputError, UnknownPresetError
from .presets import build_preset, get_preset, list_presets
from .value import BACKSPACE, EditValue

__all__ = [
    "EditValue",
    "BACKSPACE",
    "FormatterChain",
    "simulate_typing",
    "build_preset",
    "get_preset",
    "list_presets",
    "SmartInputError",
    "FormatterConfigError",
    "UnknownPresetError",
    "ConfigLoadError",
]
