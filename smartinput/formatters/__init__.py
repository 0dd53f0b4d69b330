"""
Keystroke formatters.

Every formatter implements `apply(old, candidate) -> EditValue` and rejects
an edit by returning `old`.
"""

from __future__ import annotations

from .base import Formatter, remap_selection
from .case import LowerCaseFormatter, UpperCaseFormatter
from .filtering import AllowlistFormatter, NoSpaceFormatter, SingleSpaceFormatter
from .grouping import GroupingFormatter
from .length import LengthLimitFormatter, LengthPolicy
from .numeric import DecimalFormatter, RangeFormatter, parse_plain_number
from .password import SPECIAL_CHARS, PasswordComplexityFormatter
from .start import StartDigitFormatter

__all__ = [
    "Formatter",
    "remap_selection",
    "AllowlistFormatter",
    "NoSpaceFormatter",
    "SingleSpaceFormatter",
    "LengthLimitFormatter",
    "LengthPolicy",
    "UpperCaseFormatter",
    "LowerCaseFormatter",
    "DecimalFormatter",
    "RangeFormatter",
    "parse_plain_number",
    "GroupingFormatter",
    "StartDigitFormatter",
    "PasswordComplexityFormatter",
    "SPECIAL_CHARS",
]
