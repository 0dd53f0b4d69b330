import pytest

from smartinput.chain import FormatterChain, simulate_typing
from smartinput.errors import FormatterConfigError
from smartinput.formatters import PasswordComplexityFormatter, StartDigitFormatter

from tests.infrastructure import apply_edit, val


# ---------------------------- start digit ---------------------------- #

def test_start_digit_allows_listed_digit():
    f = StartDigitFormatter([5])
    assert apply_edit(f, "", "5") == "5"
    assert apply_edit(f, "5", "51") == "51"


@pytest.mark.parametrize("text", ["4", "a5", "\u0665"])
def test_start_digit_rejects_other_first_character(text):
    assert apply_edit(StartDigitFormatter([5]), "", text) == ""


def test_start_digit_rejects_typing_in_front():
    f = StartDigitFormatter([5])
    old = val("5")
    assert f(old, val("45", 1)) == old


def test_start_digit_empty_set_disables_check():
    assert apply_edit(StartDigitFormatter(), "", "9") == "9"


def test_start_digit_empty_text_accepted():
    assert apply_edit(StartDigitFormatter([1, 2]), "1", "") == ""


@pytest.mark.parametrize("digits", [[10], [True], ["5"], 5, "5", None])
def test_start_digit_bad_digits(digits):
    with pytest.raises(FormatterConfigError):
        StartDigitFormatter(digits)


def test_start_digit_describe_is_sorted():
    assert StartDigitFormatter([2, 1]).describe() == {"allowed_digits": [1, 2]}


# ---------------------------- password ---------------------------- #

def test_password_free_typing_below_min_length():
    f = PasswordComplexityFormatter(5)
    assert apply_edit(f, "abc", "abcd") == "abcd"


def test_password_accepts_complete_password():
    f = PasswordComplexityFormatter(5)
    assert apply_edit(f, "Ab1!", "Ab1!x") == "Ab1!x"


def test_password_rejects_at_min_length_when_class_missing():
    f = PasswordComplexityFormatter(5)
    assert apply_edit(f, "abcd", "abcde") == "abcd"


def test_password_typing_gets_stuck_without_required_classes():
    # once min_length is reached an incomplete password cannot grow
    chain = FormatterChain([PasswordComplexityFormatter(5)])
    assert simulate_typing(chain, "abcdef").text == "abcd"
    assert simulate_typing(chain, "Ab1!ef").text == "Ab1!ef"


def test_password_only_selected_classes_are_required():
    f = PasswordComplexityFormatter(
        5, require_uppercase=False, require_special_chars=False,
    )
    assert f.missing_classes("abcde") == ["numbers"]
    assert apply_edit(f, "abcd", "abcd1") == "abcd1"
    assert apply_edit(f, "abcd", "abcde") == "abcd"


def test_password_empty_accepted():
    assert apply_edit(PasswordComplexityFormatter(), "a", "") == ""


def test_password_bad_min_length():
    with pytest.raises(FormatterConfigError):
        PasswordComplexityFormatter(-1)
