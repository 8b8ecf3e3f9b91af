"""Declarative filter for config values."""

from typing import Optional

from fastapi_filter.contrib.sqlalchemy import Filter

from template_config.models.config_value import ConfigValue


class ConfigValueFilter(Filter):
    """Query-param filter for the ``GET /config-values`` endpoint."""

    section_id: Optional[int] = None
    cfg_key: Optional[str] = None
    value_type_id: Optional[int] = None
    default_id: Optional[int] = None
    order_by: Optional[list[str]] = None

    class Constants(Filter.Constants):
        model = ConfigValue
