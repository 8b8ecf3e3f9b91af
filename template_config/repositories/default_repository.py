"""Repository for configuration defaults."""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_config.models.default import ConfigDefault
from template_config.repositories.exceptions import ConstraintViolation


class DefaultRepository:
    """Data access layer for default values."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, default_id: int) -> ConfigDefault | None:
        return await self.session.get(ConfigDefault, default_id)

    async def find(self, section_id: int, cfg_key: str) -> ConfigDefault | None:
        """Get the default for a key within a section (first one recorded)."""
        result = await self.session.execute(
            select(ConfigDefault)
            .where(ConfigDefault.section_id == section_id, ConfigDefault.cfg_key == cfg_key)
            .order_by(ConfigDefault.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_for_section(self, section_id: int | None = None) -> list[ConfigDefault]:
        query = select(ConfigDefault).order_by(ConfigDefault.id)
        if section_id is not None:
            query = query.where(ConfigDefault.section_id == section_id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        section_id: int | None,
        cfg_key: str | None,
        cfg_value: str | None,
        value_type_id: int | None,
    ) -> ConfigDefault:
        """Create a default.

        Raises:
            ConstraintViolation: If a referenced row is missing or a field is absent.
        """
        default = ConfigDefault(
            section_id=section_id,
            cfg_key=cfg_key,
            cfg_value=cfg_value,
            value_type_id=value_type_id,
        )
        self.session.add(default)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigDefault.__tablename__, exc)
        await self.session.refresh(default)
        return default

    async def delete(self, default_id: int) -> bool:
        """Delete a default.

        Raises:
            ConstraintViolation: While any config value references it.
        """
        if await self.get(default_id) is None:
            return False
        try:
            await self.session.execute(delete(ConfigDefault).where(ConfigDefault.id == default_id))
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigDefault.__tablename__, exc)
        return True
