"""Route Modules — one file per resource family.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never build SQL (delegate to repositories/)
"""
