from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Dict, FrozenSet

from .base import Formatter, require
from ..value import EditValue

_ASCII_DIGITS = "0123456789"


class StartDigitFormatter(Formatter):
    """
    The first character must be one of the allowed digits.
    An empty allowed set disables the check.
    """
    name = "start_digits"
    __slots__ = ("_allowed",)

    def __init__(self, allowed_digits: Iterable[int] = ()):
        require(isinstance(allowed_digits, Iterable) and not isinstance(allowed_digits, str),
                f"StartDigitFormatter: allowed digits must be a list of ints, got {allowed_digits!r}")
        digits = tuple(allowed_digits)
        require(all(isinstance(d, int) and not isinstance(d, bool) and 0 <= d <= 9 for d in digits),
                f"StartDigitFormatter: allowed digits must be 0-9, got {list(digits)}")
        self._allowed: FrozenSet[int] = frozenset(digits)

    def describe(self) -> Dict[str, Any]:
        return {"allowed_digits": sorted(self._allowed)}

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        if not candidate.text or not self._allowed:
            return candidate
        first = candidate.text[0]
        if first in _ASCII_DIGITS and int(first) in self._allowed:
            return candidate
        return old


__all__ = ["StartDigitFormatter"]
