"""Identity & Time — external identifiers and UTC timestamps for new rows.

Invariants:
    - new_cuid() returns a fresh UUID4 string on every call
    - utcnow() is timezone-aware
"""

import uuid
from datetime import datetime, timezone


def new_cuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
