from __future__ import annotations

from itertools import accumulate
from typing import List

from .base import Formatter, remap_selection
from ..value import EditValue


class _CaseFormatter(Formatter):
    __slots__ = ()

    @staticmethod
    def _convert(text: str) -> str:
        raise NotImplementedError

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        converted = self._convert(text)
        if converted == text:
            return candidate
        if len(converted) == len(text):
            return EditValue(converted, candidate.selection_start, candidate.selection_end)

        # Some characters expand on conversion ("ß" → "SS"): convert one by one
        # and move offsets by the accumulated expansion.
        pieces = [self._convert(ch) for ch in text]
        ends: List[int] = [0, *accumulate(len(p) for p in pieces)]
        return remap_selection(candidate, "".join(pieces), lambda offset: ends[offset])


class UpperCaseFormatter(_CaseFormatter):
    """Converts every character to upper case; never rejects."""
    name = "upper"
    __slots__ = ()

    @staticmethod
    def _convert(text: str) -> str:
        return text.upper()


class LowerCaseFormatter(_CaseFormatter):
    """Converts every character to lower case; never rejects."""
    name = "lower"
    __slots__ = ()

    @staticmethod
    def _convert(text: str) -> str:
        return text.lower()


__all__ = ["UpperCaseFormatter", "LowerCaseFormatter"]
