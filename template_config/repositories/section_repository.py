"""Repository for configuration sections."""

import logging

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_config.models.config_value import ConfigValue
from template_config.models.default import ConfigDefault
from template_config.models.environment import EnvironmentConfigValue
from template_config.models.section import ConfigSection
from template_config.repositories.exceptions import ConstraintViolation

logger = logging.getLogger(__name__)


class SectionRepository:
    """Data access layer for configuration sections."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, section_id: int) -> ConfigSection | None:
        return await self.session.get(ConfigSection, section_id)

    async def get_by_name(self, name: str) -> ConfigSection | None:
        result = await self.session.execute(
            select(ConfigSection).where(ConfigSection.name == name)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[ConfigSection]:
        result = await self.session.execute(select(ConfigSection).order_by(ConfigSection.id))
        return list(result.scalars().all())

    async def list_names(self) -> list[str]:
        result = await self.session.execute(select(ConfigSection.name).order_by(ConfigSection.id))
        return list(result.scalars().all())

    async def add(self, name: str) -> ConfigSection:
        """Add a section, returning the existing one when the name is taken.

        Raises:
            ConstraintViolation: If the name is missing.
        """
        existing = await self.get_by_name(name)
        if existing is not None:
            return existing

        section = ConfigSection(name=name)
        self.session.add(section)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            # Lost a race with a concurrent add of the same name
            existing = await self.get_by_name(name)
            if existing is None:
                raise ConstraintViolation.from_integrity_error(ConfigSection.__tablename__, exc)
            return existing
        await self.session.refresh(section)
        return section

    async def delete(self, section_id: int) -> int | None:
        """Delete a section; the database cascades to its defaults and config values.

        Returns the number of config values removed by the cascade, or
        ``None`` when the section does not exist.
        """
        if await self.get(section_id) is None:
            return None

        value_ids = await self._ids(
            select(ConfigValue.id).where(ConfigValue.section_id == section_id)
        )
        default_ids = await self._ids(
            select(ConfigDefault.id).where(ConfigDefault.section_id == section_id)
        )
        link_ids = await self._ids(
            select(EnvironmentConfigValue.id)
            .join(ConfigValue, EnvironmentConfigValue.config_value_id == ConfigValue.id)
            .where(ConfigValue.section_id == section_id)
        )
        try:
            await self.session.execute(
                delete(ConfigSection)
                .where(ConfigSection.id == section_id)
                .execution_options(synchronize_session="fetch")
            )
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigSection.__tablename__, exc)

        self._forget_cascaded(
            {ConfigValue: value_ids, ConfigDefault: default_ids, EnvironmentConfigValue: link_ids}
        )
        logger.info("Deleted section id=%s cascaded_values=%s", section_id, len(value_ids))
        return len(value_ids)

    async def _ids(self, stmt) -> set[int]:
        return set((await self.session.scalars(stmt)).all())

    def _forget_cascaded(self, removed: dict[type, set[int]]) -> None:
        """Drop rows removed by the database cascade from the identity map."""
        for obj in list(self.session.identity_map.values()):
            ids = removed.get(type(obj))
            if ids and inspect(obj).identity[0] in ids:
                self.session.expunge(obj)

    async def delete_by_name(self, name: str) -> int | None:
        section = await self.get_by_name(name)
        if section is None:
            return None
        return await self.delete(section.id)
