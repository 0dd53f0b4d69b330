from __future__ import annotations

import pytest

from smartinput.chain import FormatterChain
from smartinput.formatters import (
    AllowlistFormatter,
    GroupingFormatter,
    LengthLimitFormatter,
    UpperCaseFormatter,
)


@pytest.fixture
def card_chain() -> FormatterChain:
    """Digits only, 16 max, grouped by 4; built by hand, independent of presets."""
    return FormatterChain([
        AllowlistFormatter.digits_only(),
        LengthLimitFormatter(16),
        GroupingFormatter(4),
    ])


@pytest.fixture
def code_chain() -> FormatterChain:
    """Alphanumeric, 6 max, upper-cased."""
    return FormatterChain([
        AllowlistFormatter(r"[a-zA-Z0-9]"),
        LengthLimitFormatter(6),
        UpperCaseFormatter(),
    ])
