"""Database Metadata — SQLAlchemy declarative base shared by all models.

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
