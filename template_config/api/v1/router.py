"""API v1 router aggregation."""

from fastapi import APIRouter

from template_config.api.v1 import config_values, defaults, environments, sections, value_types

api_router = APIRouter()

# Include routers
api_router.include_router(sections.router, prefix="/sections", tags=["Sections"])
api_router.include_router(value_types.router, prefix="/value-types", tags=["Value Types"])
api_router.include_router(defaults.router, prefix="/defaults", tags=["Defaults"])
api_router.include_router(config_values.router, prefix="/config-values", tags=["Config Values"])
api_router.include_router(environments.router, prefix="/environments", tags=["Environments"])
