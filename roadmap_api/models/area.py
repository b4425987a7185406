"""TemplateArea ORM — a named work area inside a template.

Invariants:
    - Always belongs to a RoadmapTemplate (parent_key -> roadmaptemplate.cuid)
    - Siblings ordered by display_sequence ascending
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roadmap_api.db.base import Base, EntityMixin


class TemplateArea(EntityMixin, Base):
    """Area of a roadmap template."""
    __tablename__ = "templatearea"

    parent_key: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("roadmaptemplate.cuid", ondelete="CASCADE"),
        index=True, nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    display_sequence: Mapped[int] = mapped_column(
        "displaysequence", Integer, nullable=False, default=0,
    )
