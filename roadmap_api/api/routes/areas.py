"""Template Area Routes — areas listed/created under a template, addressed by cuid afterwards.

Invariants:
    - Listing an unknown template returns [] (not 404)
    - Creating under an unknown template returns 404 and inserts nothing
    - parent_key is taken from the path, never from the body
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roadmap_api.infrastructure.database import get_db
from roadmap_api.repositories.roadmap import AreaRepository, TemplateRepository
from roadmap_api.schemas.roadmap import AreaIn, AreaOut, MessageOut

router = APIRouter(prefix="/api", tags=["areas"])


@router.get("/roadmap-templates/{template_id}/areas", response_model=list[AreaOut])
async def list_areas(template_id: str, db: AsyncSession = Depends(get_db)):
    """List a template's areas by displaySequence."""
    return await AreaRepository(db).list(parent_key=template_id)


@router.post(
    "/roadmap-templates/{template_id}/areas",
    response_model=AreaOut, status_code=status.HTTP_201_CREATED,
)
async def create_area(
    template_id: str, body: AreaIn, db: AsyncSession = Depends(get_db),
):
    """Create an area under a template."""
    await TemplateRepository(db).get(template_id)
    return await AreaRepository(db).create(body.model_dump(), parent_key=template_id)


@router.get("/areas/{area_id}", response_model=AreaOut)
async def get_area(area_id: str, db: AsyncSession = Depends(get_db)):
    return await AreaRepository(db).get(area_id)


@router.put("/areas/{area_id}", response_model=AreaOut)
async def update_area(
    area_id: str, body: AreaIn, db: AsyncSession = Depends(get_db),
):
    return await AreaRepository(db).update(area_id, body.model_dump())


@router.delete("/areas/{area_id}", response_model=MessageOut)
async def delete_area(area_id: str, db: AsyncSession = Depends(get_db)):
    await AreaRepository(db).delete(area_id)
    return MessageOut(message="Area deleted successfully")
