"""TemplateTask ORM — a unit of work inside a template, optionally placed in an area/phase.

Invariants:
    - Always belongs to a RoadmapTemplate (parent_key -> roadmaptemplate.cuid)
    - area_id / phase_id reference cuids of the same template's area / phase, or are NULL
    - No sibling ordering column; listed in insertion order

Design Decisions:
    - ON DELETE SET NULL for area/phase: removing an area does not remove its tasks
"""

from datetime import date

from sqlalchemy import Boolean, Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roadmap_api.db.base import Base, EntityMixin


class TemplateTask(EntityMixin, Base):
    """Task of a roadmap template."""
    __tablename__ = "templatetask"

    parent_key: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("roadmaptemplate.cuid", ondelete="CASCADE"),
        index=True, nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    planned_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    planned_finish: Mapped[date | None] = mapped_column(Date, nullable=True)
    fore_act_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    fore_act_finish: Mapped[date | None] = mapped_column(Date, nullable=True)
    pct_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    pct_complete: Mapped[float | None] = mapped_column(Float, nullable=True)
    optional_flag: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    area_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("templatearea.cuid", ondelete="SET NULL"),
        nullable=True,
    )
    phase_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("templatephase.cuid", ondelete="SET NULL"),
        nullable=True,
    )
