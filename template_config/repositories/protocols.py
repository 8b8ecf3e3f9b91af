"""Protocol definitions for repository interfaces.

These protocols enable type-safe mocking in tests and decouple service
layer code from concrete SQLAlchemy implementations.
"""

from typing import Protocol

from template_config.filters.config_value import ConfigValueFilter
from template_config.models.config_value import ConfigValue
from template_config.models.default import ConfigDefault
from template_config.models.section import ConfigSection
from template_config.models.value_type import ConfigValueType
from template_config.schemas.config_value import ConfigValueUpdate


class SectionRepositoryProtocol(Protocol):
    """Interface for section data access."""

    async def get(self, section_id: int) -> ConfigSection | None: ...

    async def get_by_name(self, name: str) -> ConfigSection | None: ...

    async def add(self, name: str) -> ConfigSection: ...

    async def delete(self, section_id: int) -> int | None: ...


class ValueTypeRepositoryProtocol(Protocol):
    """Interface for value type data access."""

    async def get(self, value_type_id: int) -> ConfigValueType | None: ...

    async def get_by_name(self, name: str) -> ConfigValueType | None: ...

    async def list_all(self) -> list[ConfigValueType]: ...


class DefaultRepositoryProtocol(Protocol):
    """Interface for default value data access."""

    async def find(self, section_id: int, cfg_key: str) -> ConfigDefault | None: ...

    async def list_for_section(self, section_id: int | None = None) -> list[ConfigDefault]: ...


class ConfigValueRepositoryProtocol(Protocol):
    """Interface for config value data access."""

    async def create(
        self,
        section_id: int | None,
        cfg_key: str | None,
        cfg_value: str | None,
        value_type_id: int | None,
        default_id: int | None,
    ) -> int: ...

    async def get(self, value_id: int) -> ConfigValue | None: ...

    async def get_all(
        self, filters: ConfigValueFilter, page: int = 1, size: int = 50
    ) -> tuple[list[ConfigValue], int]: ...

    async def list_for_section(self, section_id: int) -> list[ConfigValue]: ...

    async def update(self, value_id: int, data: ConfigValueUpdate) -> ConfigValue | None: ...

    async def delete(self, value_id: int) -> bool: ...
