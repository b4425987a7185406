"""Roadmap Repositories — table, label, and ordering for each of the four entities.

Invariants:
    - Templates newest first; areas and phases by display_sequence, ties in insertion order
    - Tasks in insertion order
    - label doubles as the not-found message prefix ("Area not found")
"""

from roadmap_api.models import RoadmapTemplate, TemplateArea, TemplatePhase, TemplateTask
from roadmap_api.repositories.base import CrudRepository


class TemplateRepository(CrudRepository[RoadmapTemplate]):
    model = RoadmapTemplate
    label = "Roadmap template"
    order_by = (RoadmapTemplate.created_at.desc(), RoadmapTemplate.id.desc())


class AreaRepository(CrudRepository[TemplateArea]):
    model = TemplateArea
    label = "Area"
    order_by = (TemplateArea.display_sequence.asc(), TemplateArea.id.asc())


class PhaseRepository(CrudRepository[TemplatePhase]):
    model = TemplatePhase
    label = "Phase"
    order_by = (TemplatePhase.display_sequence.asc(), TemplatePhase.id.asc())


class TaskRepository(CrudRepository[TemplateTask]):
    model = TemplateTask
    label = "Task"
    order_by = (TemplateTask.id.asc(),)
