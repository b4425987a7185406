"""ORM Models — SQLAlchemy declarative models for the four roadmap tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - RoadmapTemplate is the root; areas, phases, and tasks scoped by parent_key

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/queries
"""

from roadmap_api.models.template import RoadmapTemplate  # noqa: F401
from roadmap_api.models.area import TemplateArea  # noqa: F401
from roadmap_api.models.phase import TemplatePhase  # noqa: F401
from roadmap_api.models.task import TemplateTask  # noqa: F401
