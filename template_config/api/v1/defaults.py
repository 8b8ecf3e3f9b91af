"""Default value API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from template_config.dependencies import DBSession
from template_config.repositories.default_repository import DefaultRepository
from template_config.schemas.default import DefaultCreate, DefaultResponse
from template_config.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=list[DefaultResponse])
async def list_defaults(
    db: DBSession,
    section_id: int | None = Query(None),
) -> list[DefaultResponse]:
    """List defaults, optionally restricted to one section."""
    repo = DefaultRepository(db)
    return [DefaultResponse.model_validate(d) for d in await repo.list_for_section(section_id)]


@router.post("", response_model=DefaultResponse, status_code=status.HTTP_201_CREATED)
async def create_default(body: DefaultCreate, db: DBSession) -> DefaultResponse:
    repo = DefaultRepository(db)
    default = await repo.create(
        section_id=body.section_id,
        cfg_key=body.cfg_key,
        cfg_value=body.cfg_value,
        value_type_id=body.value_type_id,
    )
    return DefaultResponse.model_validate(default)


@router.delete(
    "/{default_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(audit_logged("delete_default"))],
)
async def delete_default(default_id: int, db: DBSession) -> None:
    """Delete a default. Refused with 409 while config values reference it."""
    repo = DefaultRepository(db)
    if not await repo.delete(default_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Default {default_id} not found",
        )
