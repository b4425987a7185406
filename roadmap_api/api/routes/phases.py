"""Template Phase Routes — phases listed/created under a template, addressed by cuid afterwards.

Invariants:
    - Listing an unknown template returns [] (not 404)
    - Creating under an unknown template returns 404 and inserts nothing
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roadmap_api.infrastructure.database import get_db
from roadmap_api.repositories.roadmap import PhaseRepository, TemplateRepository
from roadmap_api.schemas.roadmap import MessageOut, PhaseIn, PhaseOut

router = APIRouter(prefix="/api", tags=["phases"])


@router.get("/roadmap-templates/{template_id}/phases", response_model=list[PhaseOut])
async def list_phases(template_id: str, db: AsyncSession = Depends(get_db)):
    """List a template's phases by displaySequence."""
    return await PhaseRepository(db).list(parent_key=template_id)


@router.post(
    "/roadmap-templates/{template_id}/phases",
    response_model=PhaseOut, status_code=status.HTTP_201_CREATED,
)
async def create_phase(
    template_id: str, body: PhaseIn, db: AsyncSession = Depends(get_db),
):
    """Create a phase under a template."""
    await TemplateRepository(db).get(template_id)
    return await PhaseRepository(db).create(body.model_dump(), parent_key=template_id)


@router.get("/phases/{phase_id}", response_model=PhaseOut)
async def get_phase(phase_id: str, db: AsyncSession = Depends(get_db)):
    return await PhaseRepository(db).get(phase_id)


@router.put("/phases/{phase_id}", response_model=PhaseOut)
async def update_phase(
    phase_id: str, body: PhaseIn, db: AsyncSession = Depends(get_db),
):
    """Replace every phase field; omitted optional fields become null."""
    return await PhaseRepository(db).update(phase_id, body.model_dump())


@router.delete("/phases/{phase_id}", response_model=MessageOut)
async def delete_phase(phase_id: str, db: AsyncSession = Depends(get_db)):
    await PhaseRepository(db).delete(phase_id)
    return MessageOut(message="Phase deleted successfully")
