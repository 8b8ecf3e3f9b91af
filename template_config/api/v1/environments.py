"""Environment API endpoints."""

from fastapi import APIRouter, HTTPException, status

from template_config.dependencies import DBSession
from template_config.repositories.environment_repository import EnvironmentRepository
from template_config.schemas.config_value import ConfigValueResponse
from template_config.schemas.environment import (
    EnvironmentBindingResponse,
    EnvironmentResponse,
    EnvironmentUpsert,
)

router = APIRouter()


async def _require_environment_id(repo: EnvironmentRepository, name: str) -> int:
    environment_id = await repo.get_id(name)
    if environment_id is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Environment '{name}' not found",
        )
    return environment_id


@router.post("", response_model=EnvironmentResponse)
async def upsert_environment(body: EnvironmentUpsert, db: DBSession) -> EnvironmentResponse:
    """Create an environment, or update the namespace of an existing one."""
    repo = EnvironmentRepository(db)
    environment = await repo.upsert(body.name, body.namespace)
    return EnvironmentResponse.model_validate(environment)


@router.get("/{name}/config-values", response_model=list[ConfigValueResponse])
async def list_environment_values(name: str, db: DBSession) -> list[ConfigValueResponse]:
    repo = EnvironmentRepository(db)
    environment_id = await _require_environment_id(repo, name)
    values = await repo.list_config_values(environment_id)
    return [ConfigValueResponse.model_validate(v) for v in values]


@router.post(
    "/{name}/config-values/{value_id}",
    response_model=EnvironmentBindingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def bind_config_value(name: str, value_id: int, db: DBSession) -> EnvironmentBindingResponse:
    """Bind an existing config value to an environment."""
    repo = EnvironmentRepository(db)
    environment_id = await _require_environment_id(repo, name)
    link_id = await repo.add_config_value(environment_id, value_id)
    return EnvironmentBindingResponse(
        id=link_id, environment_id=environment_id, config_value_id=value_id
    )
