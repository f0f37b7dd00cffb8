"""Services Layer — imperative shell around the pure moderation core.

Invariants:
    - Services own IO (DB writes, logging); rules stay in core/
"""
