"""Value type API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from template_config.dependencies import DBSession
from template_config.repositories.value_type_repository import ValueTypeRepository
from template_config.schemas.value_type import ValueTypeCreate, ValueTypeResponse
from template_config.utils.audit import audit_logged

router = APIRouter()


@router.get("", response_model=list[ValueTypeResponse])
async def list_value_types(db: DBSession) -> list[ValueTypeResponse]:
    repo = ValueTypeRepository(db)
    return [ValueTypeResponse.model_validate(t) for t in await repo.list_all()]


@router.post("", response_model=ValueTypeResponse, status_code=status.HTTP_201_CREATED)
async def add_value_type(body: ValueTypeCreate, db: DBSession) -> ValueTypeResponse:
    repo = ValueTypeRepository(db)
    return ValueTypeResponse.model_validate(await repo.add(body.name))


@router.delete(
    "/{value_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(audit_logged("delete_value_type"))],
)
async def delete_value_type(value_type_id: int, db: DBSession) -> None:
    """Delete a value type. Refused with 409 while config values reference it."""
    repo = ValueTypeRepository(db)
    if not await repo.delete(value_type_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Value type {value_type_id} not found",
        )
