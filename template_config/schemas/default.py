"""Pydantic schemas for configuration defaults."""

from pydantic import BaseModel


class DefaultCreate(BaseModel):
    """Schema for creating a default value."""

    section_id: int
    cfg_key: str
    cfg_value: str
    value_type_id: int


class DefaultResponse(BaseModel):
    """Schema for default value response."""

    id: int
    section_id: int
    cfg_key: str
    cfg_value: str
    value_type_id: int

    model_config = {"from_attributes": True}
