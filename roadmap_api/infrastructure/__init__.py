"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/
"""
