"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary, before any statement is issued
    - Field names on the wire match column names (camelCase where the store uses it)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
