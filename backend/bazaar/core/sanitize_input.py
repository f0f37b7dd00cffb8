"""Input Sanitization — strips markup from user text before it is judged or stored.

Invariants:
    - Non-string input always yields "" (never raises)
    - Output never contains an HTML tag, a javascript: scheme or an on*= handler
    - sanitize_title output is single-line

Design Decisions:
    - Strip, then decode &lt;/&gt;, then strip again: defeats entity-encoded tags
    - Hard length caps (5000 content, 200 title) sit above the validator limits
      so validators still report "too long" instead of silently truncating
"""

import re

MAX_CONTENT_LENGTH = 5000
MAX_TITLE_LENGTH = 200

_TAG_RE = re.compile(r"<[^>]*>")
_JS_SCHEME_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)
_NEWLINES_RE = re.compile(r"[\r\n]+")


def strip_html(value: object) -> str:
    if not value or not isinstance(value, str):
        return ""
    text = _TAG_RE.sub("", value)
    text = text.replace("&lt;", "<").replace("&gt;", ">")
    text = _TAG_RE.sub("", text)
    text = _JS_SCHEME_RE.sub("", text)
    text = _EVENT_HANDLER_RE.sub("", text)
    return text.strip()


def sanitize_content(value: object) -> str:
    """Description / comment body: markup removed, newlines kept."""
    return strip_html(value)[:MAX_CONTENT_LENGTH]


def sanitize_title(value: object) -> str:
    """Title: markup removed, collapsed onto one line."""
    return _NEWLINES_RE.sub(" ", strip_html(value))[:MAX_TITLE_LENGTH]
