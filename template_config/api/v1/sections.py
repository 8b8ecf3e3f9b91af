"""Section API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from template_config.dependencies import DBSession
from template_config.repositories.config_value_repository import ConfigValueRepository
from template_config.repositories.default_repository import DefaultRepository
from template_config.repositories.section_repository import SectionRepository
from template_config.repositories.value_type_repository import ValueTypeRepository
from template_config.schemas.section import (
    SectionCreate,
    SectionDeleteResponse,
    SectionResponse,
)
from template_config.services.config_value_service import ConfigValueService
from template_config.utils.audit import audit_logged

router = APIRouter()

audit = logging.getLogger("audit")


@router.get("", response_model=list[SectionResponse])
async def list_sections(db: DBSession) -> list[SectionResponse]:
    """List all configuration sections."""
    repo = SectionRepository(db)
    return [SectionResponse.model_validate(s) for s in await repo.list_all()]


@router.post("", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
async def add_section(body: SectionCreate, db: DBSession) -> SectionResponse:
    """Add a section. Adding an existing name returns the existing section."""
    repo = SectionRepository(db)
    section = await repo.add(body.name)
    return SectionResponse.model_validate(section)


@router.get("/{section_id}/render")
async def render_section(section_id: int, db: DBSession) -> dict[str, Any]:
    """Render the typed key/value mapping of a section (defaults overlaid by values)."""
    service = ConfigValueService(
        ConfigValueRepository(db),
        SectionRepository(db),
        ValueTypeRepository(db),
        DefaultRepository(db),
    )
    rendered = await service.render_section(section_id)
    if rendered is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Section {section_id} not found",
        )
    return rendered


@router.delete(
    "/{section_id}",
    response_model=SectionDeleteResponse,
    dependencies=[Depends(audit_logged("delete_section"))],
)
async def delete_section(section_id: int, db: DBSession) -> SectionDeleteResponse:
    """Delete a section and, by cascade, every config value it owns."""
    repo = SectionRepository(db)
    deleted_values = await repo.delete(section_id)

    if deleted_values is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Section {section_id} not found",
        )

    audit.info("AUDIT cascade section=%s deleted_values=%s", section_id, deleted_values)
    return SectionDeleteResponse(id=section_id, deleted_values=deleted_values)
