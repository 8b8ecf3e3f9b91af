"""Pydantic schemas package."""
from template_config.schemas.config_value import (
    ConfigValueCreate,
    ConfigValueCreated,
    ConfigValueListResponse,
    ConfigValueResponse,
    ConfigValueSet,
    ConfigValueUpdate,
)
from template_config.schemas.default import DefaultCreate, DefaultResponse
from template_config.schemas.environment import (
    EnvironmentBindingResponse,
    EnvironmentResponse,
    EnvironmentUpsert,
)
from template_config.schemas.section import (
    SectionCreate,
    SectionDeleteResponse,
    SectionResponse,
)
from template_config.schemas.value_type import ValueTypeCreate, ValueTypeResponse

__all__ = [
    "ConfigValueCreate",
    "ConfigValueCreated",
    "ConfigValueListResponse",
    "ConfigValueResponse",
    "ConfigValueSet",
    "ConfigValueUpdate",
    "DefaultCreate",
    "DefaultResponse",
    "EnvironmentBindingResponse",
    "EnvironmentResponse",
    "EnvironmentUpsert",
    "SectionCreate",
    "SectionDeleteResponse",
    "SectionResponse",
    "ValueTypeCreate",
    "ValueTypeResponse",
]
