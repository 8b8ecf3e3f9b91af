"""Database repositories for data access."""
from template_config.repositories.config_value_repository import ConfigValueRepository
from template_config.repositories.default_repository import DefaultRepository
from template_config.repositories.environment_repository import EnvironmentRepository
from template_config.repositories.exceptions import ConstraintViolation
from template_config.repositories.section_repository import SectionRepository
from template_config.repositories.value_type_repository import ValueTypeRepository

__all__ = [
    "ConfigValueRepository",
    "DefaultRepository",
    "EnvironmentRepository",
    "SectionRepository",
    "ValueTypeRepository",
    "ConstraintViolation",
]
