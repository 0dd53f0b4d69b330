from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple

from .errors import FormatterConfigError
from .formatters.base import Formatter
from .value import EditValue

logger = logging.getLogger(__name__)

__all__ = ["FormatterChain", "simulate_typing"]


class FormatterChain:
    """
    Ordered sequence of formatters folded over one edit.

    Every stage sees the output of the previous stage as its candidate, but
    its rejection fallback is always the value the field showed before the
    keystroke (`old`), never an intermediate result. A stage that rejects
    therefore resets the edit; later stages then re-check `old`, which they
    accepted on the previous keystroke.

    The chain is frozen once built and holds no per-field state.
    """
    __slots__ = ("_formatters",)

    def __init__(self, formatters: Iterable[Formatter] = ()):
        items = tuple(formatters)
        for i, f in enumerate(items):
            if not isinstance(f, Formatter):
                raise FormatterConfigError(
                    f"FormatterChain: item {i} is not a Formatter: {f!r}"
                )
        self._formatters: Tuple[Formatter, ...] = items

    @property
    def formatters(self) -> Tuple[Formatter, ...]:
        return self._formatters

    def extend(self, *more: Formatter) -> FormatterChain:
        """New chain with `more` appended; this one is left untouched."""
        return FormatterChain(self._formatters + more)

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        current = candidate
        for f in self._formatters:
            result = f.apply(old, current)
            if result is not current and logger.isEnabledFor(logging.DEBUG):
                if result == old and current != old:
                    logger.debug("%s rejected %r, keeping %r", f.name, current.text, old.text)
                elif result != current:
                    logger.debug("%s rewrote %r -> %r", f.name, current.text, result.text)
            current = result
        return current

    def __call__(self, old: EditValue, candidate: EditValue) -> EditValue:
        return self.apply(old, candidate)

    def __iter__(self) -> Iterator[Formatter]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __repr__(self) -> str:
        return f"FormatterChain([{', '.join(f.name for f in self._formatters)}])"


def simulate_typing(
    chain: FormatterChain,
    keystrokes: Iterable[str],
    start: EditValue | None = None,
) -> EditValue:
    """
    Replay keystrokes through `chain` in order, one edit per key.

    Each key is a character typed at the caret, or BACKSPACE ("\\b").
    The accepted result of every edit becomes `old` for the next one.
    """
    current = start if start is not None else EditValue.empty()
    for key in keystrokes:
        current = chain.apply(current, current.keystroke(key))
    return current
