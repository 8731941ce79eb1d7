import io

import pytest

from dslabs.coloredout import (
    Enable,
    colorize_against,
    output_bold,
    output_bold_digits,
    output_green,
    output_notfound,
    output_red,
)


def test_output_red_wraps_text():
    assert output_red("x") == "\033[31mx\033[39m"


def test_output_green_wraps_text():
    assert output_green("7") == "\033[32m7\033[39m"


def test_output_notfound_wraps_text():
    assert output_notfound("q") == "\033[31;4mq\033[39;24m"


def test_output_bold_enabled():
    out = io.StringIO()
    output_bold("Tree", out, Enable.ENABLE)
    assert out.getvalue() == "\033[1mTree\033[22m"


@pytest.mark.parametrize("enable", [Enable.DISABLE, Enable.COUT])
def test_output_bold_plain_when_not_enabled(enable):
    out = io.StringIO()
    output_bold("Tree", out, enable)
    assert out.getvalue() == "Tree"


def test_output_bold_digits_enabled():
    out = io.StringIO()
    output_bold_digits("a1-", out, Enable.ENABLE)
    assert out.getvalue() == "a\033[1m1\033[22m\033[1m-\033[22m"


def test_output_bold_digits_disabled():
    out = io.StringIO()
    output_bold_digits("a1-", out, Enable.DISABLE)
    assert out.getvalue() == "a1-"


def test_colorize_identical_plain_text():
    assert colorize_against("ab", "ab") == "ab"


def test_colorize_matching_digit_is_green():
    assert colorize_against("1", "1") == output_green("1")


def test_colorize_mismatch_is_red():
    assert colorize_against("x", "y") == output_red("x")


def test_colorize_missing_output_marked_notfound():
    assert colorize_against("", "a\n") == output_notfound("a") + "\n"


def test_colorize_extra_output_is_red():
    assert colorize_against("abc", "ab") == "ab" + output_red("c")


def test_colorize_passes_escape_sequences_through():
    actual = "\033[1mab\033[22m"
    assert colorize_against(actual, "ab") == actual


def test_colorize_realigns_on_border_char():
    assert colorize_against("a~", "ab~") == "a" + output_notfound("b") + "~"


def test_colorize_empty_inputs():
    assert colorize_against("", "") == ""