"""Roadmap Template Routes — CRUD for the root entity.

Invariants:
    - Body validated by Pydantic before reaching the handler
    - 404 body is {"error": "Roadmap template not found"}
    - DELETE answers 200 with a confirmation message (children handled by the schema)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roadmap_api.infrastructure.database import get_db
from roadmap_api.repositories.roadmap import TemplateRepository
from roadmap_api.schemas.roadmap import MessageOut, TemplateIn, TemplateOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/roadmap-templates", tags=["roadmap-templates"])


@router.get("", response_model=list[TemplateOut])
async def list_templates(db: AsyncSession = Depends(get_db)):
    """List all roadmap templates, newest first."""
    return await TemplateRepository(db).list()


@router.post(
    "", response_model=TemplateOut, status_code=status.HTTP_201_CREATED,
)
async def create_template(body: TemplateIn, db: AsyncSession = Depends(get_db)):
    """Create a roadmap template."""
    template = await TemplateRepository(db).create(body.model_dump())
    logger.info(f"Roadmap template {template.cuid} created")
    return template


@router.get("/{template_id}", response_model=TemplateOut)
async def get_template(template_id: str, db: AsyncSession = Depends(get_db)):
    """Get a roadmap template by cuid."""
    return await TemplateRepository(db).get(template_id)


@router.put("/{template_id}", response_model=TemplateOut)
async def update_template(
    template_id: str, body: TemplateIn, db: AsyncSession = Depends(get_db),
):
    """Replace a roadmap template's name and description."""
    return await TemplateRepository(db).update(template_id, body.model_dump())


@router.delete("/{template_id}", response_model=MessageOut)
async def delete_template(template_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a roadmap template."""
    await TemplateRepository(db).delete(template_id)
    logger.info(f"Roadmap template {template_id} deleted")
    return MessageOut(message="Roadmap template deleted successfully")
