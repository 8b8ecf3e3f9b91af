"""Database models package."""

from template_config.models.base import Base
from template_config.models.config_value import ConfigValue
from template_config.models.default import ConfigDefault
from template_config.models.environment import Environment, EnvironmentConfigValue
from template_config.models.section import ConfigSection
from template_config.models.value_type import ConfigValueType, ValueKind

__all__ = [
    # Base
    "Base",
    # Models
    "ConfigSection",
    "ConfigValueType",
    "ConfigDefault",
    "ConfigValue",
    "Environment",
    "EnvironmentConfigValue",
    # Enums
    "ValueKind",
]
