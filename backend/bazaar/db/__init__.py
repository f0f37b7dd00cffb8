"""Database Infrastructure — SQLAlchemy Base shared by models and migrations.

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
