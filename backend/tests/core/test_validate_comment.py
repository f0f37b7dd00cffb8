"""Comment Validation — tests for the comment rule chain.

Tests cover:
    - Empty, short and long comments
    - Prohibited words reported with the matched terms
    - Repetition and digit-spam thresholds
    - Links rejected wherever they appear
    - Rule order: first violation wins
"""

import pytest

from bazaar.core.domain_types import ReasonCode
from bazaar.core.validate_comment import validate_comment


def test_accepts_regular_comment():
    assert validate_comment("Отличный продавец, рекомендую!").valid


@pytest.mark.parametrize("text", ["", "   ", None])
def test_rejects_empty(text):
    assert validate_comment(text).error_key == ReasonCode.COMMENT_EMPTY


def test_rejects_single_character():
    assert validate_comment("a").error_key == ReasonCode.COMMENT_SHORT


def test_accepts_two_characters():
    assert validate_comment("ок").valid


def test_rejects_longer_than_five_hundred():
    result = validate_comment("Хорошо. " * 70)
    assert result.error_key == ReasonCode.COMMENT_LONG
    assert result.params == {"max_length": 500}


def test_rejects_bad_words_and_reports_them():
    result = validate_comment("Это scam, не покупайте")
    assert result.error_key == ReasonCode.COMMENT_BAD_WORDS
    assert result.params["flagged"] == ["scam"]


def test_rejects_ten_repeated_characters():
    result = validate_comment("Круто" + "о" * 10)
    assert result.error_key == ReasonCode.COMMENT_REPEATED


def test_rejects_digit_spam_over_twenty_chars():
    result = validate_comment("123456789012345678901")
    assert result.error_key == ReasonCode.COMMENT_DIGITS


def test_digit_rule_ignores_short_comments():
    assert validate_comment("+380 50 123").valid


@pytest.mark.parametrize("text", [
    "Смотри тут http://example.com",
    "Лучше здесь https://example.com/item",
    "заходи на www.example.com",
    "HTTPS://EXAMPLE.COM отличная цена",
    "http://",
    "www.",
])
def test_rejects_links_anywhere(text):
    result = validate_comment(text)
    assert not result.valid
    assert result.error_key == ReasonCode.COMMENT_LINKS


def test_bad_words_checked_before_links():
    result = validate_comment("casino http://example.com")
    assert result.error_key == ReasonCode.COMMENT_BAD_WORDS


def test_is_idempotent():
    text = "Смотри тут http://example.com"
    assert validate_comment(text) == validate_comment(text)
