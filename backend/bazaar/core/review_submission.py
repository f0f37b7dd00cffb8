"""Submission Review — runs every field rule for a whole form in one pass.

Invariants:
    - Returns failures only; an empty dict means the submission is accepted
    - Field order is fixed (title, description, price, content) so the first
      error shown to the user is stable
    - Each field reports its own first failure; fields do not short-circuit
      each other
"""

from bazaar.core.check_content import check_content
from bazaar.core.domain_types import ReasonCode, Verdict
from bazaar.core.validate_comment import validate_comment
from bazaar.core.validate_listing import (
    validate_description, validate_price, validate_title,
)


def review_listing(
    title: str | None,
    description: str | None,
    price: object,
    listing_type: object,
) -> dict[str, Verdict]:
    """Validate a listing draft. Returns {field: failing Verdict}."""
    verdicts = {
        "title": validate_title(title),
        "description": validate_description(description),
        "price": validate_price(price, listing_type),
    }
    failures = {name: v for name, v in verdicts.items() if not v.valid}

    content = check_content(f"{title or ''} {description or ''}")
    if not content.safe:
        failures["content"] = Verdict.fail(
            ReasonCode.CONTENT_FLAGGED, flagged=content.flagged,
        )
    return failures


def review_comment(text: str | None) -> dict[str, Verdict]:
    verdict = validate_comment(text)
    return {} if verdict.valid else {"text": verdict}
