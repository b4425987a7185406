"""RoadmapTemplate ORM — root entity owning areas, phases, and tasks.

Invariants:
    - cuid is the external identifier used in URLs; id is internal only
    - Only name/description are mutable through the API
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roadmap_api.db.base import Base, EntityMixin


class RoadmapTemplate(EntityMixin, Base):
    """Roadmap template, the aggregate root."""
    __tablename__ = "roadmaptemplate"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
