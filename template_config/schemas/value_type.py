"""Pydantic schemas for value types."""

from pydantic import BaseModel, Field


class ValueTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ValueTypeResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
