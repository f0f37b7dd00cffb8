"""Listing Quality — tests for the completeness score and its labels."""

import pytest

from bazaar.core.listing_quality import calculate_quality, quality_label


def _keys(report):
    return [gap.key for gap in report.breakdown]


def test_empty_listing_scores_zero_with_every_gap():
    report = calculate_quality({})
    assert report.score == 0
    assert _keys(report) == [
        "quality_title_short",
        "quality_description_short",
        "quality_photos_none",
        "quality_price_missing",
        "quality_location_missing",
        "quality_contacts_missing",
    ]


def test_complete_listing_scores_hundred():
    report = calculate_quality({
        "title": "Продам горный велосипед",
        "description": "Отличное состояние, катался одно лето, все обслужено. Торг уместен.",
        "images": ["a.jpg", "b.jpg", "c.jpg"],
        "price": 500,
        "location": "Киев",
        "contacts": "@seller",
    })
    assert report.score == 100
    assert report.breakdown == []


def test_medium_description_gets_partial_points():
    report = calculate_quality({"description": "Отличное состояние, торг"})
    assert report.score == 10
    gap = next(g for g in report.breakdown if g.key == "quality_description_more")
    assert (gap.score, gap.max) == (10, 20)


def test_one_photo_gets_partial_points():
    report = calculate_quality({"images": ["a.jpg"]})
    assert report.score == 20
    assert "quality_photos_more" in _keys(report)


@pytest.mark.parametrize("price", [0, None, "abc", -5])
def test_non_positive_price_is_a_gap(price):
    assert "quality_price_missing" in _keys(calculate_quality({"price": price}))


def test_numeric_string_price_counts():
    assert "quality_price_missing" not in _keys(calculate_quality({"price": "250"}))


def test_score_stays_in_range():
    for listing in ({}, {"title": "x" * 50, "images": list(range(10))}):
        assert 0 <= calculate_quality(listing).score <= 100


def test_to_dict_includes_label():
    data = calculate_quality({}).to_dict()
    assert data["score"] == 0
    assert data["label"] == "weak"
    assert data["breakdown"][0] == {"key": "quality_title_short", "score": 0, "max": 10}


@pytest.mark.parametrize("score, label", [
    (0, "weak"), (39, "weak"), (40, "good"), (74, "good"), (75, "excellent"), (100, "excellent"),
])
def test_quality_label_bands(score, label):
    assert quality_label(score) == label


@pytest.mark.parametrize("price", [10**400, True, float("inf"), "9" * 400])
def test_unusable_price_is_a_gap_not_an_error(price):
    assert "quality_price_missing" in _keys(calculate_quality({"price": price}))
