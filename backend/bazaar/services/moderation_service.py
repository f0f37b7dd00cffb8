"""Moderation Handlers — sanitize, judge, localize and record submissions.

Invariants:
    - Input is sanitized before any rule runs (the rules judge what would be stored)
    - Core rules are called as-is; this layer adds only IO and presentation
    - A rejection is recorded once per failing field when record_rejections is on
    - Locale: explicit request locale > detected from text > settings default

Design Decisions:
    - Handlers receive the AsyncSession from the route (no hidden globals)
    - Rejections are committed before the response is built: a failed write
      surfaces as DatabaseError instead of a silently missing audit row
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.config import Settings
from bazaar.core.check_content import check_content, check_image, has_emoji
from bazaar.core.detect_language import detect_locale
from bazaar.core.domain_types import Locale, Subject, Verdict
from bazaar.core.errors import ResourceNotFoundError
from bazaar.core.listing_quality import calculate_quality, quality_label
from bazaar.core.moderation_strings import format_error_message, get_quality_hint
from bazaar.core.review_submission import review_comment, review_listing
from bazaar.core.sanitize_input import sanitize_content, sanitize_title
from bazaar.models.moderation_rejection import EXCERPT_LENGTH, ModerationRejection
from bazaar.schemas.moderation import (
    CommentReviewRequest,
    ContentCheckRequest,
    ContentCheckResponse,
    FieldError,
    ImageCheckRequest,
    ImageCheckResponse,
    ListingReviewRequest,
    QualityGapResponse,
    QualityRequest,
    QualityResponse,
    ReviewResponse,
)

logger = logging.getLogger(__name__)


class ModerationHandlers:
    """Moderation endpoints' behavior, one method per route."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    def resolve_locale(self, requested: Locale | None, text: str) -> Locale:
        if requested is not None:
            return requested
        return detect_locale(text, fallback=self.settings.default_locale)

    async def review_listing(self, body: ListingReviewRequest) -> ReviewResponse:
        """Judge a listing draft: title, description, price, prohibited words."""
        title = sanitize_title(body.title)
        description = sanitize_content(body.description)
        locale = self.resolve_locale(body.locale, f"{title} {description}")

        failures = review_listing(title, description, body.price, body.listing_type)
        excerpts = {
            "title": title,
            "description": description,
            "price": "" if body.price is None else str(body.price),
            "content": f"{title} {description}",
        }
        await self._record(Subject.LISTING, failures, excerpts, locale)

        return ReviewResponse(
            accepted=not failures,
            locale=locale,
            errors=self._field_errors(failures, locale),
            sanitized={"title": title, "description": description},
        )

    async def review_comment(self, body: CommentReviewRequest) -> ReviewResponse:
        """Judge a listing comment or seller review."""
        text = sanitize_content(body.text)
        locale = self.resolve_locale(body.locale, text)

        failures = review_comment(text)
        await self._record(Subject.COMMENT, failures, {"text": text}, locale)

        return ReviewResponse(
            accepted=not failures,
            locale=locale,
            errors=self._field_errors(failures, locale),
            sanitized={"text": text},
        )

    def check_content(self, body: ContentCheckRequest) -> ContentCheckResponse:
        verdict = check_content(body.text)
        return ContentCheckResponse(
            safe=verdict.safe,
            flagged=verdict.flagged,
            has_emoji=has_emoji(body.text),
        )

    def check_image(self, body: ImageCheckRequest) -> ImageCheckResponse:
        verdict = check_image(body.size_bytes, body.content_type)
        locale = body.locale or self.settings.default_locale
        return ImageCheckResponse(
            safe=verdict.safe,
            error_key=verdict.error_key.value if verdict.error_key else None,
            params=verdict.params,
            message=(
                format_error_message(verdict.error_key, locale, verdict.params)
                if verdict.error_key else None
            ),
        )

    def score_quality(self, body: QualityRequest) -> QualityResponse:
        """Completeness score with localized hints for every gap."""
        locale = body.locale or self.settings.default_locale
        report = calculate_quality(body.model_dump())
        return QualityResponse(
            score=report.score,
            label=quality_label(report.score),
            breakdown=[
                QualityGapResponse(
                    key=gap.key, score=gap.score, max=gap.max,
                    hint=get_quality_hint(gap.key, locale),
                )
                for gap in report.breakdown
            ],
        )

    async def list_rejections(
        self, limit: int, offset: int, subject: Subject | None = None,
    ) -> list[ModerationRejection]:
        """Most recent rejections first."""
        query = select(ModerationRejection).order_by(
            ModerationRejection.created_at.desc(),
        )
        if subject is not None:
            query = query.where(ModerationRejection.subject == subject.value)
        query = query.limit(limit).offset(offset)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_rejection(self, rejection_id: UUID) -> ModerationRejection:
        result = await self.db.execute(
            select(ModerationRejection).where(
                ModerationRejection.id == rejection_id,
            ),
        )
        rejection = result.scalar_one_or_none()
        if rejection is None:
            raise ResourceNotFoundError("Rejection", str(rejection_id))
        return rejection

    # --- internals ------------------------------------------------------------

    def _field_errors(
        self, failures: dict[str, Verdict], locale: Locale,
    ) -> list[FieldError]:
        return [
            FieldError(
                field=name,
                error_key=verdict.error_key.value,
                params=verdict.params,
                message=format_error_message(
                    verdict.error_key, locale, verdict.params,
                ),
            )
            for name, verdict in failures.items()
        ]

    async def _record(
        self,
        subject: Subject,
        failures: dict[str, Verdict],
        excerpts: dict[str, str],
        locale: Locale,
    ) -> None:
        if not failures or not self.settings.record_rejections:
            return
        for name, verdict in failures.items():
            logger.info(
                f"Rejected {subject.value} {name}: {verdict.error_key.value}",
                extra={
                    "subject": subject.value,
                    "field": name,
                    "error_key": verdict.error_key.value,
                },
            )
            self.db.add(ModerationRejection(
                subject=subject.value,
                field=name,
                error_key=verdict.error_key.value,
                params=verdict.params,
                excerpt=excerpts.get(name, "")[:EXCERPT_LENGTH],
                locale=locale.value,
            ))
        await self.db.commit()
