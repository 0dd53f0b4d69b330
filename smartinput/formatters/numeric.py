"""
Numeric shape and range validators.

Both are accept-or-reject: the candidate is either returned verbatim or the
edit is dropped in favour of `old`.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from .base import Formatter, require
from ..value import EditValue

_DIGITS_AND_DOT = re.compile(r"[0-9.]*")
# plain decimal notation only: no exponent, no inf/nan, no underscores
_PLAIN_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_bound(value: Any) -> bool:
    return value is None or (isinstance(value, (int, float)) and not isinstance(value, bool))


def parse_plain_number(text: str) -> Optional[float]:
    """Parse `text` as a plain decimal number; None when it is not one."""
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    return float(text)


class DecimalFormatter(Formatter):
    """
    Accepts `digits[.digits]` with at most one dot and bounded digit counts
    on each side. A trailing dot is accepted so the user can keep typing.
    """
    name = "decimal"
    __slots__ = ("_max_digits_before", "_max_digits_after")

    def __init__(self, max_digits_before: Optional[int] = None, max_digits_after: int = 2):
        require(max_digits_before is None or _is_count(max_digits_before),
                f"DecimalFormatter: max_digits_before must be a non-negative int, got {max_digits_before!r}")
        require(_is_count(max_digits_after),
                f"DecimalFormatter: max_digits_after must be a non-negative int, got {max_digits_after!r}")
        self._max_digits_before = max_digits_before
        self._max_digits_after = max_digits_after

    def accepts(self, text: str) -> bool:
        if not _DIGITS_AND_DOT.fullmatch(text):
            return False
        if text.count(".") > 1:
            return False
        integer, _, fraction = text.partition(".")
        if self._max_digits_before is not None and len(integer) > self._max_digits_before:
            return False
        return len(fraction) <= self._max_digits_after

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        if not candidate.text or self.accepts(candidate.text):
            return candidate
        return old


class RangeFormatter(Formatter):
    """
    Rejects numbers outside [min_value, max_value]; a missing bound leaves
    that side open. Empty text counts as "still typing", and so does a
    trailing dot unless `allow_trailing_dot` is off, in which case "500." is
    checked as 500.
    """
    name = "range"
    __slots__ = ("_min_value", "_max_value", "_allow_trailing_dot")

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        *,
        allow_trailing_dot: bool = True,
    ):
        require(_is_bound(min_value), f"RangeFormatter: min_value must be a number, got {min_value!r}")
        require(_is_bound(max_value), f"RangeFormatter: max_value must be a number, got {max_value!r}")
        require(min_value is None or max_value is None or min_value <= max_value,
                f"RangeFormatter: min_value ({min_value}) > max_value ({max_value})")
        self._min_value = min_value
        self._max_value = max_value
        self._allow_trailing_dot = allow_trailing_dot

    def accepts(self, text: str) -> bool:
        value = parse_plain_number(text)
        if value is None:
            return False
        if self._min_value is not None and value < self._min_value:
            return False
        if self._max_value is not None and value > self._max_value:
            return False
        return True

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        if not text or (self._allow_trailing_dot and text.endswith(".")):
            return candidate
        return candidate if self.accepts(text) else old


__all__ = ["DecimalFormatter", "RangeFormatter", "parse_plain_number"]
