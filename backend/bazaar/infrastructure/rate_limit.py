"""Rate Limiting — slowapi limits on the review endpoints, per client address.

Invariants:
    - A client gets at most N review calls per endpoint in any moving window
    - The client is the TCP peer (request.client.host); X-Forwarded-For and
      X-Real-IP are never trusted, so a client cannot mint a fresh identity
    - Limits and the on/off switch are read from settings on every request

Design Decisions:
    - slowapi on in-memory storage: single uvicorn worker, state lost on
      restart is acceptable for advisory throttling (ADR: no extra infrastructure)
    - Moving window over fixed window: no burst of 2N across a window edge
    - slowapi's RateLimitExceeded is converted to RateLimitExceededError so
      429s share the BazaarError envelope
"""

from typing import Callable

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from bazaar.config import get_settings
from bazaar.core.errors import ErrorContext, RateLimitExceededError

# ADR: module-level limiter, same lifetime as the process
limiter = Limiter(
    key_func=get_remote_address,
    strategy="moving-window",
    storage_uri="memory://",
)


def limit_string(limit_setting: str) -> str:
    """Current limit as a `limits` expression, e.g. "5 per 60 seconds"."""
    settings = get_settings()
    limit = getattr(settings, limit_setting)
    return f"{limit} per {settings.rate_limit_window_seconds} seconds"


def _rate_limit_disabled() -> bool:
    return not get_settings().rate_limit_enabled


def rate_limited(limit_setting: str) -> Callable:
    """Route decorator applying the limit named by limit_setting.

    The route must accept a `request: Request` argument (slowapi reads it).
    """
    return limiter.limit(
        lambda: limit_string(limit_setting),
        exempt_when=_rate_limit_disabled,
    )


def to_bazaar_error(
    request: Request, exc: RateLimitExceeded,
) -> RateLimitExceededError:
    """Map slowapi's exception onto the service error hierarchy."""
    item = exc.limit.limit
    scope = request.url.path.rstrip("/").rsplit("/", 1)[-1]
    client = get_remote_address(request)
    return RateLimitExceededError(
        scope, item.amount, item.get_expiry(), ErrorContext(client_key=client),
    )
