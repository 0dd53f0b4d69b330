from __future__ import annotations

import re
from typing import Dict, List

from .base import Formatter, require
from ..value import EditValue

SPECIAL_CHARS = '!@#$%^&*(),.?":{}|<>'

_CLASSES: Dict[str, re.Pattern[str]] = {
    "uppercase": re.compile(r"[A-Z]"),
    "lowercase": re.compile(r"[a-z]"),
    "numbers": re.compile(r"[0-9]"),
    "special_chars": re.compile("[" + re.escape(SPECIAL_CHARS) + "]"),
}


class PasswordComplexityFormatter(Formatter):
    """
    Lets the user type freely while the password is shorter than
    `min_length`; from then on every edit must leave all required character
    classes present, otherwise it is dropped.
    """
    name = "password_complexity"
    __slots__ = ("_min_length", "_required")

    def __init__(
        self,
        min_length: int = 8,
        *,
        require_uppercase: bool = True,
        require_lowercase: bool = True,
        require_numbers: bool = True,
        require_special_chars: bool = True,
    ):
        require(isinstance(min_length, int) and not isinstance(min_length, bool) and min_length >= 0,
                f"PasswordComplexityFormatter: min_length must be a non-negative int, got {min_length!r}")
        flags = {
            "uppercase": require_uppercase,
            "lowercase": require_lowercase,
            "numbers": require_numbers,
            "special_chars": require_special_chars,
        }
        self._min_length = min_length
        self._required = tuple(k for k, on in flags.items() if on)

    def missing_classes(self, text: str) -> List[str]:
        return [k for k in self._required if not _CLASSES[k].search(text)]

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        if not text or len(text) < self._min_length:
            return candidate
        return old if self.missing_classes(text) else candidate


__all__ = ["PasswordComplexityFormatter", "SPECIAL_CHARS"]
