"""TemplatePhase ORM — a scheduled phase of a template with progress tracking.

Invariants:
    - Always belongs to a RoadmapTemplate (parent_key -> roadmaptemplate.cuid)
    - Siblings ordered by display_sequence ascending
    - state is free-form text (no state machine)
"""

from datetime import date

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from roadmap_api.db.base import Base, EntityMixin


class TemplatePhase(EntityMixin, Base):
    """Phase of a roadmap template."""
    __tablename__ = "templatephase"

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
    planned_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    planned_finish: Mapped[date | None] = mapped_column(Date, nullable=True)
    fore_act_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    fore_act_finish: Mapped[date | None] = mapped_column(Date, nullable=True)
    pct_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    pct_complete: Mapped[float | None] = mapped_column(Float, nullable=True)
    initial_duration: Mapped[int | None] = mapped_column(
        "initialduration", Integer, nullable=True,
    )
    duration_unit: Mapped[str | None] = mapped_column(
        "durationunit", String(20), nullable=True,
    )
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
