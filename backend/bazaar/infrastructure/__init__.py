"""Infrastructure Layer — database, logging and throttling for the HTTP shell.

Invariants:
    - Infrastructure never imports rule logic from core/ (only errors and types)
    - All database errors are mapped to DatabaseError before leaving this layer
"""
