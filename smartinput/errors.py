"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from SmartInputError.

Edit-time problems are never reported through exceptions: a formatter that
does not like a keystroke returns the previous value. Exceptions are reserved
for misconfiguration, which is detected when formatters, chains or field
configs are built.
"""

from __future__ import annotations


class SmartInputError(Exception):
    """
    Base class for all user-facing errors in smart-input.

    These errors indicate problems that the user can fix:
    bad formatter parameters, unknown presets, broken field configs.
    """
    pass


class FormatterConfigError(SmartInputError, ValueError):
    """Formatter, chain or preset constructed with invalid parameters."""
    pass


class UnknownPresetError(SmartInputError):
    """Requested preset or validator kind is not registered."""
    pass


class ConfigLoadError(SmartInputError):
    """Field configuration file is missing or malformed."""
    pass


__all__ = ["SmartInputError", "FormatterConfigError", "UnknownPresetError", "ConfigLoadError"]
