import pytest

from data_sanitizer.filters import Digit, StripTags
from data_sanitizer.filters.regex_ops import extract_digits, strip_tags

def test_digit_keeps_ascii_digits_only():
    assert Digit().apply("(555) 010-2000") == "5550102000"
    assert extract_digits("a1b2٣") == "12"
    assert Digit().apply("no digits") == ""

def test_digit_leaves_non_strings():
    assert Digit().apply(42) == 42
    assert Digit().apply(None) is None

def test_strip_tags_basic():
    assert strip_tags("<p>Hello <b>world</b></p>") == "Hello world"

def test_strip_tags_comments_and_unclosed():
    assert strip_tags("a<!-- hidden -->b") == "ab"
    assert strip_tags("keep <br/>this<i") == "keep this"

def test_lone_angle_bracket_is_text():
    assert strip_tags("1 < 2 and 3 > 2") == "1 < 2 and 3 > 2"

def test_allowed_tags_survive():
    html = "<p>Hi <b>bold</b> <i>it</i></p>"
    assert StripTags().apply(html, ["b"]) == "Hi <b>bold</b> it"
    assert StripTags().apply(html, ["<b>", "I"]) == "Hi <b>bold</b> <i>it</i>"

def test_strip_tags_non_string():
    assert StripTags().apply(None) is None

def _is_subsequence(sub, full):
    it = iter(full)
    return all(ch in it for ch in sub)

@pytest.mark.parametrize("raw", ["", "   ", "abc", "٣4²5", "+1 (555) 010-2000", "0a0b9", "１２3"])
def test_digit_is_idempotent_and_keeps_order(raw):
    once = Digit().apply(raw)
    assert Digit().apply(once) == once
    assert set(once) <= set("0123456789")
    assert _is_subsequence(once, raw)
