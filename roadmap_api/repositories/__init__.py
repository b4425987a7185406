"""Repositories — one parameterized SQL statement per CRUD operation.

Invariants:
    - Every statement is timed and logged
    - SQLAlchemy failures are rolled back and re-raised as DatabaseError
"""
