"""Pydantic schemas for deployment environments."""

from pydantic import BaseModel, Field


class EnvironmentUpsert(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    namespace: str = Field(..., min_length=1, max_length=255)


class EnvironmentResponse(BaseModel):
    id: int
    name: str
    namespace: str

    model_config = {"from_attributes": True}


class EnvironmentBindingResponse(BaseModel):
    id: int
    environment_id: int
    config_value_id: int
