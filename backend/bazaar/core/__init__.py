"""Core Layer — pure moderation rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the HTTP service and
      any other caller run exactly the same rules
"""
