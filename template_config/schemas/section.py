"""Pydantic schemas for configuration sections."""

from pydantic import BaseModel, Field


class SectionCreate(BaseModel):
    """Schema for adding a section."""

    name: str = Field(..., min_length=1, max_length=255)


class SectionResponse(BaseModel):
    """Schema for section response."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class SectionDeleteResponse(BaseModel):
    """Outcome of a section delete, including the cascaded row count."""

    id: int
    deleted_values: int
