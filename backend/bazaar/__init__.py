"""Bazaar Moderation — listing and comment moderation for the Bazaar mini-app.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
