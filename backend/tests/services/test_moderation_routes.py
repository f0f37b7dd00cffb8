"""Moderation Routes — end-to-end checks through the FastAPI app.

Invariants:
    - A rule failure is 200 with accepted=false and localized messages
    - Malformed request bodies are 400 with the VALIDATION_ERROR envelope
    - Listing reviews beyond the per-window limit are 429 with Retry-After
"""

from httpx import ASGITransport, AsyncClient

from bazaar.main import app

LISTINGS = "/api/v1/moderation/listings"
COMMENTS = "/api/v1/moderation/comments"


def _listing(**overrides):
    body = {
        "title": "Продам iPhone 13",
        "description": "Отличное состояние, полный комплект",
        "price": 500,
        "type": "sell",
        "locale": "ru",
    }
    body.update(overrides)
    return body


# --- Listings -------------------------------------------------------------------

async def test_valid_listing_is_accepted(client):
    res = await client.post(LISTINGS, json=_listing())
    assert res.status_code == 200
    data = res.json()
    assert data["accepted"] is True
    assert data["errors"] == []
    assert data["locale"] == "ru"
    assert data["sanitized"]["title"] == "Продам iPhone 13"


async def test_price_over_ceiling_returns_localized_message(client):
    res = await client.post(LISTINGS, json=_listing(
        title="Selling mountain bike",
        description="Excellent condition, rarely used",
        price=100000,
        locale="en",
    ))
    assert res.status_code == 200
    data = res.json()
    assert data["accepted"] is False
    assert data["errors"] == [{
        "field": "price",
        "error_key": "validation_price_max_exceeded",
        "params": {"max_price": 50000},
        "message": "Maximum price: 50000€",
    }]


async def test_services_type_uses_service_ceiling(client):
    res = await client.post(LISTINGS, json=_listing(type="services", price=10000))
    error = res.json()["errors"][0]
    assert error["params"] == {"max_price": 5000}


async def test_non_numeric_price_is_a_verdict_not_a_400(client):
    res = await client.post(LISTINGS, json=_listing(price="abc"))
    assert res.status_code == 200
    assert res.json()["errors"][0]["error_key"] == "validation_price_invalid"


async def test_price_too_large_for_a_float_is_a_verdict(client):
    res = await client.post(LISTINGS, json=_listing(price=10**400))
    assert res.status_code == 200
    assert res.json()["errors"][0]["error_key"] == "validation_price_invalid"


async def test_boolean_price_is_not_read_as_one(client):
    res = await client.post(LISTINGS, json=_listing(price=True))
    assert res.status_code == 200
    assert res.json()["errors"][0]["error_key"] == "validation_price_invalid"


async def test_html_is_stripped_before_rules_run(client):
    res = await client.post(LISTINGS, json=_listing(
        title="<b>Продам диван</b>",
        description="<script>x</script>Мягкий диван, почти новый",
    ))
    data = res.json()
    assert data["accepted"] is True
    assert data["sanitized"]["title"] == "Продам диван"
    assert "<" not in data["sanitized"]["description"]


async def test_every_failing_field_is_listed(client):
    res = await client.post(LISTINGS, json=_listing(
        title="abc", description="", price=-1,
    ))
    fields = [e["field"] for e in res.json()["errors"]]
    assert fields == ["title", "description", "price"]


async def test_prohibited_words_flag_content(client):
    res = await client.post(LISTINGS, json=_listing(
        description="Лучшее онлайн казино, заходите",
    ))
    error = res.json()["errors"][0]
    assert error["field"] == "content"
    assert error["params"]["flagged"] == ["казино"]


async def test_locale_detected_when_not_given(client):
    body = _listing(
        title="Selling mountain bike",
        description="Excellent condition, rarely used, price is negotiable",
    )
    del body["locale"]
    res = await client.post(LISTINGS, json=body)
    assert res.json()["locale"] == "en"


# --- Comments -------------------------------------------------------------------

async def test_comment_with_link_is_rejected(client):
    res = await client.post(COMMENTS, json={
        "text": "пиши на www.example.com", "locale": "ru",
    })
    assert res.status_code == 200
    data = res.json()
    assert data["accepted"] is False
    assert data["errors"][0]["field"] == "text"
    assert data["errors"][0]["error_key"] == "validation_comment_links"


async def test_clean_comment_is_accepted(client):
    res = await client.post(COMMENTS, json={"text": "Спасибо, все отлично!"})
    assert res.json()["accepted"] is True


# --- Content, images, quality ---------------------------------------------------

async def test_content_check_reports_words_and_emoji(client):
    res = await client.post("/api/v1/moderation/content", json={
        "text": "Лучшее казино \U0001F3B0",
    })
    assert res.json() == {"safe": False, "flagged": ["казино"], "has_emoji": True}


async def test_oversized_image_is_rejected(client):
    res = await client.post("/api/v1/moderation/images", json={
        "size_bytes": 6 * 1024 * 1024, "content_type": "image/png", "locale": "en",
    })
    data = res.json()
    assert data["safe"] is False
    assert data["error_key"] == "image_too_large"
    assert data["message"] == "File is too large (max 5MB)"


async def test_small_image_is_accepted(client):
    res = await client.post("/api/v1/moderation/images", json={
        "size_bytes": 2048, "content_type": "image/jpeg",
    })
    assert res.json()["safe"] is True
    assert res.json()["message"] is None


async def test_negative_image_size_is_400(client):
    res = await client.post("/api/v1/moderation/images", json={"size_bytes": -1})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.size_bytes"


async def test_quality_of_empty_draft(client):
    res = await client.post("/api/v1/moderation/quality", json={})
    data = res.json()
    assert data["score"] == 0
    assert data["label"] == "weak"
    assert len(data["breakdown"]) == 6
    assert data["breakdown"][0]["hint"] == "Короткий заголовок"


async def test_quality_hints_follow_locale(client):
    res = await client.post("/api/v1/moderation/quality", json={"locale": "en"})
    assert res.json()["breakdown"][0]["hint"] == "Short title"


# --- Rate limiting --------------------------------------------------------------

async def test_sixth_listing_in_window_is_rate_limited(client):
    for _ in range(5):
        res = await client.post(LISTINGS, json=_listing())
        assert res.status_code == 200

    res = await client.post(LISTINGS, json=_listing())
    assert res.status_code == 429
    assert res.headers["retry-after"] == "60"
    assert res.json()["error"]["code"] == "RATE_LIMITED"


async def test_rate_limit_is_per_client(client):
    for _ in range(5):
        await client.post(LISTINGS, json=_listing())

    other = AsyncClient(
        transport=ASGITransport(app=app, client=("203.0.113.7", 123)),
        base_url="http://test",
    )
    async with other:
        res = await other.post(LISTINGS, json=_listing())
    assert res.status_code == 200


async def test_forwarded_headers_do_not_reset_the_limit(client):
    for _ in range(5):
        await client.post(LISTINGS, json=_listing())

    for headers in (
        {"X-Forwarded-For": "203.0.113.7"},
        {"X-Real-IP": "198.51.100.4"},
    ):
        res = await client.post(LISTINGS, json=_listing(), headers=headers)
        assert res.status_code == 429


async def test_listing_limit_does_not_affect_comments(client):
    for _ in range(5):
        await client.post(LISTINGS, json=_listing())

    res = await client.post(COMMENTS, json={"text": "Хороший продавец"})
    assert res.status_code == 200
