"""Repository for config values (the ConfigValue store)."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_config.filters.config_value import ConfigValueFilter
from template_config.models.config_value import ConfigValue
from template_config.repositories.exceptions import ConstraintViolation
from template_config.schemas.config_value import ConfigValueUpdate


class ConfigValueRepository:
    """Data access layer for config values.

    Integrity rules are enforced by the database; this layer only translates
    ``IntegrityError`` into :class:`ConstraintViolation`.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        section_id: int | None,
        cfg_key: str | None,
        cfg_value: str | None,
        value_type_id: int | None,
        default_id: int | None,
    ) -> int:
        """Insert a config value and return its new id.

        Raises:
            ConstraintViolation: If a referenced section, value type or default
                does not exist, or a required field is ``None``. Nothing is
                persisted in that case.
        """
        value = ConfigValue(
            section_id=section_id,
            cfg_key=cfg_key,
            cfg_value=cfg_value,
            value_type_id=value_type_id,
            default_id=default_id,
        )
        self.session.add(value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigValue.__tablename__, exc)
        return value.id

    async def get(self, value_id: int) -> ConfigValue | None:
        return await self.session.get(ConfigValue, value_id)

    async def get_all(
        self,
        filters: ConfigValueFilter,
        page: int = 1,
        size: int = 50,
    ) -> tuple[list[ConfigValue], int]:
        """Get config values with declarative filtering and pagination."""
        query = filters.filter(select(ConfigValue))
        count_query = filters.filter(select(func.count()).select_from(ConfigValue))

        total = await self.session.scalar(count_query) or 0

        query = filters.sort(query)
        if not filters.order_by:
            query = query.order_by(ConfigValue.id)
        query = query.offset((page - 1) * size).limit(size)

        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def list_for_section(self, section_id: int) -> list[ConfigValue]:
        """Get every value owned by a section, oldest first."""
        result = await self.session.execute(
            select(ConfigValue).where(ConfigValue.section_id == section_id).order_by(ConfigValue.id)
        )
        return list(result.scalars().all())

    async def update(self, value_id: int, data: ConfigValueUpdate) -> ConfigValue | None:
        """Update the provided fields of a config value.

        Raises:
            ConstraintViolation: If a new reference points at a missing row.
        """
        value = await self.get(value_id)
        if value is None:
            return None

        for field, new_value in data.model_dump(exclude_unset=True).items():
            setattr(value, field, new_value)

        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigValue.__tablename__, exc)
        await self.session.refresh(value)
        return value

    async def delete(self, value_id: int) -> bool:
        """Delete a config value by id."""
        result = await self.session.execute(delete(ConfigValue).where(ConfigValue.id == value_id))
        await self.session.flush()
        return result.rowcount > 0
