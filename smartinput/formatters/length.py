from __future__ import annotations

from typing import Literal

from .base import Formatter, require
from ..value import EditValue

LengthPolicy = Literal["truncate", "reject"]


class LengthLimitFormatter(Formatter):
    """
    Limits the text to `max_length` characters.

    • policy="truncate": an over-long candidate is cut to `max_length`, unless
      `old` was already full with a collapsed caret, in which case the
      keystroke is dropped.
    • policy="reject": an over-long candidate is dropped as a whole.
    """
    name = "max_length"
    __slots__ = ("_max_length", "_policy")

    def __init__(self, max_length: int, policy: LengthPolicy = "truncate"):
        require(isinstance(max_length, int) and not isinstance(max_length, bool) and max_length >= 0,
                f"LengthLimitFormatter: max_length must be a non-negative int, got {max_length!r}")
        require(policy in ("truncate", "reject"),
                f"LengthLimitFormatter: policy must be 'truncate' or 'reject', got {policy!r}")
        self._max_length = max_length
        self._policy = policy

    @property
    def max_length(self) -> int:
        return self._max_length

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        if len(candidate.text) <= self._max_length:
            return candidate
        if self._policy == "reject":
            return old
        if old.is_collapsed and len(old.text) == self._max_length:
            return old
        return candidate.with_text(candidate.text[:self._max_length])


__all__ = ["LengthLimitFormatter", "LengthPolicy"]
