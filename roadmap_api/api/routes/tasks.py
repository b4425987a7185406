"""Template Task Routes — tasks listed/created under a template, addressed by cuid afterwards.

Invariants:
    - area_id / phase_id, when given, must name an area / phase of the task's own
      template; otherwise 400 and nothing is written
    - Creating under an unknown template returns 404 and inserts nothing
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roadmap_api.core.errors import ReferenceValidationError
from roadmap_api.infrastructure.database import get_db
from roadmap_api.repositories.roadmap import (
    AreaRepository, PhaseRepository, TaskRepository, TemplateRepository,
)
from roadmap_api.schemas.roadmap import MessageOut, TaskIn, TaskOut

router = APIRouter(prefix="/api", tags=["tasks"])


async def check_task_references(
    body: TaskIn, template_id: str, db: AsyncSession,
) -> None:
    """Reject area/phase references that do not belong to template_id."""
    if body.area_id is not None and not await AreaRepository(db).exists(
        body.area_id, parent_key=template_id,
    ):
        raise ReferenceValidationError(
            "area_id does not reference an area of this template", "area_id",
        )
    if body.phase_id is not None and not await PhaseRepository(db).exists(
        body.phase_id, parent_key=template_id,
    ):
        raise ReferenceValidationError(
            "phase_id does not reference a phase of this template", "phase_id",
        )


@router.get("/roadmap-templates/{template_id}/tasks", response_model=list[TaskOut])
async def list_tasks(template_id: str, db: AsyncSession = Depends(get_db)):
    """List a template's tasks in insertion order."""
    return await TaskRepository(db).list(parent_key=template_id)


@router.post(
    "/roadmap-templates/{template_id}/tasks",
    response_model=TaskOut, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    template_id: str, body: TaskIn, db: AsyncSession = Depends(get_db),
):
    """Create a task under a template."""
    await TemplateRepository(db).get(template_id)
    await check_task_references(body, template_id, db)
    return await TaskRepository(db).create(body.model_dump(), parent_key=template_id)


@router.get("/tasks/{task_id}", response_model=TaskOut)
async def get_task(task_id: str, db: AsyncSession = Depends(get_db)):
    return await TaskRepository(db).get(task_id)


@router.put("/tasks/{task_id}", response_model=TaskOut)
async def update_task(
    task_id: str, body: TaskIn, db: AsyncSession = Depends(get_db),
):
    """Replace every task field; omitted optional fields become null."""
    repo = TaskRepository(db)
    if body.area_id is not None or body.phase_id is not None:
        task = await repo.get(task_id)
        await check_task_references(body, task.parent_key, db)
    return await repo.update(task_id, body.model_dump())


@router.delete("/tasks/{task_id}", response_model=MessageOut)
async def delete_task(task_id: str, db: AsyncSession = Depends(get_db)):
    await TaskRepository(db).delete(task_id)
    return MessageOut(message="Task deleted successfully")
