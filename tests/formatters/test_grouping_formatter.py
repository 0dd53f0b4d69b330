import pytest

from smartinput.errors import FormatterConfigError
from smartinput.formatters import GroupingFormatter
from smartinput.value import EditValue

from tests.infrastructure import run_edit, val


def test_groups_by_four():
    assert run_edit(GroupingFormatter(), "1234567", "12345678") == EditValue("1234 5678", 9, 9)


def test_caret_after_complete_group_stays_before_separator():
    assert run_edit(GroupingFormatter(), "1234", "12345") == EditValue("1234 5", 6, 6)
    assert GroupingFormatter()(val(""), val("1234", 4)) == EditValue("1234", 4, 4)


def test_insert_in_the_middle_regroups():
    # typed "9" at offset 2 of "1234 5678"
    g = GroupingFormatter()
    assert g(val("1234 5678", 2), val("12934 5678", 3)) == EditValue("1293 4567 8", 3, 3)


def test_backspace_over_last_digit_drops_dangling_separator():
    g = GroupingFormatter()
    old = val("1234 5")
    assert g(old, old.delete_backward()) == EditValue("1234", 4, 4)


def test_already_grouped_text_is_stable():
    g = GroupingFormatter()
    once = g(val(""), val("1234 5678 9"))
    assert once == EditValue("1234 5678 9", 11, 11)
    assert g(val(""), once) == once


def test_custom_group_and_separator():
    g = GroupingFormatter(3, "-")
    assert g(val(""), val("123456")) == EditValue("123-456", 7, 7)
    assert g.ungroup("123-456") == "123456"


@pytest.mark.parametrize("old,candidate", [
    (val(""), val("1")),
    (val("1234"), val("12345")),
    (val("1234 5678"), val("12934 5678", 3)),
    (val("1234 5678", 5), val("1234 05678", 6)),
    (val("1234 5678 9012 3456"), val("1234 5678 9012 3456")),
    (val("12 34"), val("1 2 3 4 5 6")),
])
def test_regrouping_formatter_output_is_stable(old, candidate):
    g = GroupingFormatter()
    grouped = g(old, candidate).text
    assert g.group(g.ungroup(grouped)) == grouped


@pytest.mark.parametrize("kwargs", [{"group_size": 0}, {"separator": ""}, {"separator": "--"}])
def test_grouping_bad_config(kwargs):
    with pytest.raises(FormatterConfigError):
        GroupingFormatter(**kwargs)


def test_describe():
    assert GroupingFormatter().describe() == {"group_size": 4, "separator": " "}
