"""Pydantic schemas for config values."""

from pydantic import BaseModel, Field


class ConfigValueCreate(BaseModel):
    """Schema for creating a config value from parent ids."""

    section_id: int
    cfg_key: str
    cfg_value: str
    value_type_id: int
    default_id: int


class ConfigValueSet(BaseModel):
    """Schema for recording a config value by section, key and value type names.

    The default is looked up from the section and key.
    """

    section: str = Field(..., min_length=1, max_length=255)
    key: str
    value: str
    value_type: str = Field(..., min_length=1, max_length=255)


class ConfigValueUpdate(BaseModel):
    """Schema for updating a config value (partial)."""

    section_id: int | None = None
    cfg_key: str | None = None
    cfg_value: str | None = None
    value_type_id: int | None = None
    default_id: int | None = None


class ConfigValueCreated(BaseModel):
    id: int


class ConfigValueResponse(BaseModel):
    """Schema for config value response."""

    id: int
    section_id: int
    cfg_key: str
    cfg_value: str
    value_type_id: int
    default_id: int

    model_config = {"from_attributes": True}


class ConfigValueListResponse(BaseModel):
    """Schema for paginated config value list."""

    items: list[ConfigValueResponse]
    total: int
    page: int
    size: int
    pages: int
