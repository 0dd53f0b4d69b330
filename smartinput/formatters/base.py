from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from ..errors import FormatterConfigError
from ..value import EditValue, clamp

__all__ = ["Formatter", "remap_selection", "require"]


class Formatter(ABC):
    """
    Base class of a keystroke formatter.

    A formatter receives the last accepted value (`old`) and the proposed one
    (`candidate`) and returns the value to show. Rejection is expressed by
    returning `old` unchanged; exceptions are never part of edit-time control
    flow. Only construction-time configuration may be kept on the instance,
    so one formatter can serve any number of fields.
    """
    #: Short name used in logs and CLI output
    name: str = "formatter"

    __slots__ = ()

    @abstractmethod
    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        """Return the value to show after this edit."""
        pass

    def __call__(self, old: EditValue, candidate: EditValue) -> EditValue:
        return self.apply(old, candidate)

    def describe(self) -> Dict[str, Any]:
        """Construction parameters, for diagnostics."""
        return {slot.lstrip("_"): getattr(self, slot) for slot in _all_slots(type(self))}

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.describe().items())
        return f"{type(self).__name__}({params})"


def _all_slots(cls: type) -> list[str]:
    out: list[str] = []
    for kls in reversed(cls.__mro__):
        for slot in getattr(kls, "__slots__", ()):
            if slot not in out:
                out.append(slot)
    return out


def remap_selection(value: EditValue, text: str, mapper: Callable[[int], int]) -> EditValue:
    """
    Build a value for `text` whose selection ends are `mapper(offset)` of the
    ends of `value`, clamped to the new text.
    """
    n = len(text)
    start = clamp(mapper(value.selection_start), n)
    end = clamp(mapper(value.selection_end), n)
    if end < start:
        start, end = end, start
    return EditValue(text, start, end)


def require(condition: bool, message: str) -> None:
    """Construction-time parameter check."""
    if not condition:
        raise FormatterConfigError(message)
