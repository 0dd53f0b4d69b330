"""
Properties shared by formatters and presets: edits never raise, selections
stay in bounds, settled values pass through unchanged and violating edits
fall back to the previous value. Reference scenarios at the end.
"""

import pytest

from smartinput.chain import simulate_typing
from smartinput.formatters import (
    AllowlistFormatter,
    DecimalFormatter,
    LengthLimitFormatter,
    PasswordComplexityFormatter,
    RangeFormatter,
    SingleSpaceFormatter,
    StartDigitFormatter,
    UpperCaseFormatter,
)
from smartinput.presets import build_preset, list_presets
from smartinput.value import BACKSPACE, EditValue

from tests.infrastructure import apply_edit, assert_well_formed

SAMPLES = [
    "",
    "John  Doe",
    "12345678901234567890",
    "user name@mail.com",
    "ab-12 CD",
    "98.6",
    "55.555",
    "Ab1!xyz9",
    "12" + BACKSPACE + BACKSPACE + BACKSPACE + "3",
    "https://a.b/c d",
]


@pytest.mark.parametrize("preset", list_presets())
@pytest.mark.parametrize("keys", SAMPLES)
def test_typing_keeps_value_well_formed_and_settled(preset, keys):
    chain = build_preset(preset)
    result = simulate_typing(chain, keys)
    assert_well_formed(result)
    assert chain(result, result) == result


@pytest.mark.parametrize("preset", list_presets())
@pytest.mark.parametrize("candidate", [
    EditValue("12ab34", 1, 5),
    EditValue("  x  ", 0, 5),
    EditValue("abc", 0, 0),
    EditValue("", 0, 0),
])
def test_any_selection_stays_in_bounds(preset, candidate):
    result = build_preset(preset)(EditValue.empty(), candidate)
    assert_well_formed(result)


@pytest.mark.parametrize("formatter,old,candidate", [
    (AllowlistFormatter.digits_only(), "12", "abc"),
    (LengthLimitFormatter(2, policy="reject"), "12", "123"),
    (LengthLimitFormatter(2), "12", "123"),
    (DecimalFormatter(max_digits_after=1), "1.5", "1.55"),
    (RangeFormatter(0, 10), "1", "11"),
    (StartDigitFormatter([1]), "", "2"),
    (PasswordComplexityFormatter(3), "ab", "abc"),
])
def test_violating_candidate_returns_old(formatter, old, candidate):
    old_value = EditValue.at_end(old)
    assert formatter(old_value, EditValue.at_end(candidate)) == old_value


@pytest.mark.parametrize("text", ["abc", "straße", "\u01c6", "\u0130stanbul", "123"])
def test_upper_twice_equals_upper_once(text):
    upper = UpperCaseFormatter()
    once = upper(EditValue.empty(), EditValue.at_end(text))
    assert upper(EditValue.empty(), once) == once


# ---------------------------- scenarios ---------------------------- #

def test_single_space_scenario():
    assert apply_edit(SingleSpaceFormatter(), "John", "John  Doe") == "John Doe"


def test_grouping_scenario(card_chain):
    assert apply_edit(card_chain, "", "12345678") == "1234 5678"


def test_range_scenario():
    assert apply_edit(RangeFormatter(max_value=100), "", "101") == ""


def test_start_digit_scenario():
    f = StartDigitFormatter([5])
    assert apply_edit(f, "", "4") == ""
    assert apply_edit(f, "", "5") == "5"


def test_decimal_scenario():
    assert apply_edit(DecimalFormatter(max_digits_after=1), "10.5", "10.55") == "10.5"


def test_upper_case_scenario():
    assert apply_edit(UpperCaseFormatter(), "", "abc") == "ABC"
