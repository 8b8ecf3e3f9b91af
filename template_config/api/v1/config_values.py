"""Config value API endpoints."""

from math import ceil

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi_filter import FilterDepends

from template_config.dependencies import DBSession
from template_config.filters.config_value import ConfigValueFilter
from template_config.repositories.config_value_repository import ConfigValueRepository
from template_config.repositories.default_repository import DefaultRepository
from template_config.repositories.section_repository import SectionRepository
from template_config.repositories.value_type_repository import ValueTypeRepository
from template_config.schemas.config_value import (
    ConfigValueCreate,
    ConfigValueCreated,
    ConfigValueListResponse,
    ConfigValueResponse,
    ConfigValueSet,
    ConfigValueUpdate,
)
from template_config.services.config_value_service import ConfigValueService
from template_config.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=ConfigValueListResponse)
async def list_config_values(
    db: DBSession,
    filters: ConfigValueFilter = FilterDepends(ConfigValueFilter),
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=100),
) -> ConfigValueListResponse:
    """
    List config values with optional filtering.

    - **section_id**, **value_type_id**, **default_id**: exact match
    - **cfg_key**: exact key match
    - **order_by**: Sort fields (e.g. ``cfg_key``, ``-id``)
    """
    repo = ConfigValueRepository(db)
    values, total = await repo.get_all(filters, page=page, size=size)

    return ConfigValueListResponse(
        items=[ConfigValueResponse.model_validate(v) for v in values],
        total=total,
        page=page,
        size=size,
        pages=ceil(total / size) if size > 0 else 0,
    )


@router.post("", response_model=ConfigValueCreated, status_code=status.HTTP_201_CREATED)
async def create_config_value(body: ConfigValueCreate, db: DBSession) -> ConfigValueCreated:
    """Create a config value from existing section, value type and default ids."""
    repo = ConfigValueRepository(db)
    value_id = await repo.create(
        section_id=body.section_id,
        cfg_key=body.cfg_key,
        cfg_value=body.cfg_value,
        value_type_id=body.value_type_id,
        default_id=body.default_id,
    )
    return ConfigValueCreated(id=value_id)


@router.post("/by-name", response_model=ConfigValueCreated, status_code=status.HTTP_201_CREATED)
async def set_config_value(body: ConfigValueSet, db: DBSession) -> ConfigValueCreated:
    """Record a config value by section name, key and value type name."""
    service = ConfigValueService(
        ConfigValueRepository(db),
        SectionRepository(db),
        ValueTypeRepository(db),
        DefaultRepository(db),
    )
    value_id = await service.set_config_value(body.section, body.key, body.value, body.value_type)
    return ConfigValueCreated(id=value_id)


@router.get("/{value_id}", response_model=ConfigValueResponse)
async def get_config_value(value_id: int, db: DBSession) -> ConfigValueResponse:
    repo = ConfigValueRepository(db)
    value = await repo.get(value_id)

    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Config value {value_id} not found",
        )

    return ConfigValueResponse.model_validate(value)


@router.put("/{value_id}", response_model=ConfigValueResponse)
async def update_config_value(
    value_id: int,
    body: ConfigValueUpdate,
    db: DBSession,
) -> ConfigValueResponse:
    """Update a config value. Accepts partial updates."""
    repo = ConfigValueRepository(db)
    value = await repo.update(value_id, body)

    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Config value {value_id} not found",
        )

    return ConfigValueResponse.model_validate(value)


@router.delete(
    "/{value_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(audit_logged("delete_config_value"))],
)
async def delete_config_value(value_id: int, db: DBSession) -> None:
    repo = ConfigValueRepository(db)
    if not await repo.delete(value_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Config value {value_id} not found",
        )
