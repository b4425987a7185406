"""Core Layer — error taxonomy and identity helpers, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, repositories/, infrastructure/, or db/
"""
