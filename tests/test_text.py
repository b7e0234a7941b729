import pytest

from quickfetch.text import matches_sanitized_key, sanitize_key


def test_sanitize_key_worked_example():
    assert sanitize_key("Content-Type") == "contenttype"


def test_sanitize_key_drops_whitespace_and_underscores():
    assert sanitize_key(" X_Api -Key\t\r\n") == sanitize_key("xapikey")


def test_sanitize_key_is_idempotent():
    once = sanitize_key("Set-Cookie_Value")
    assert sanitize_key(once) == once


@pytest.mark.parametrize(
    "key",
    ["Content-Type", "content_type", " CONTENT TYPE ", "contentType", "Content\t-\tType"],
)
def test_matches_various_spellings(key):
    assert matches_sanitized_key(key, "contenttype") is True


def test_sanitized_side_compared_case_insensitively():
    assert matches_sanitized_key("content-type", "ContentType") is True


def test_sanitized_side_is_not_stripped():
    assert matches_sanitized_key("Content-Type", "content-type") is False


def test_prefix_does_not_match():
    assert matches_sanitized_key("Content", "contenttype") is False
    assert matches_sanitized_key("Content-Type-Extra", "contenttype") is False


def test_empty_key_matches_only_empty():
    assert matches_sanitized_key("- _", "") is True
    assert matches_sanitized_key("", "a") is False


def test_non_ascii_letters_are_not_lowered():
    assert matches_sanitized_key("É", "é") is False