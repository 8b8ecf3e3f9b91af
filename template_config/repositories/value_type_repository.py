"""Repository for configuration value types."""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_config.models.value_type import ConfigValueType
from template_config.repositories.exceptions import ConstraintViolation


class ValueTypeRepository:
    """Data access layer for value types."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, value_type_id: int) -> ConfigValueType | None:
        return await self.session.get(ConfigValueType, value_type_id)

    async def get_by_name(self, name: str) -> ConfigValueType | None:
        result = await self.session.execute(
            select(ConfigValueType).where(ConfigValueType.name == name)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[ConfigValueType]:
        result = await self.session.execute(select(ConfigValueType).order_by(ConfigValueType.id))
        return list(result.scalars().all())

    async def add(self, name: str) -> ConfigValueType:
        """Add a value type, returning the existing one when the name is taken."""
        existing = await self.get_by_name(name)
        if existing is not None:
            return existing

        value_type = ConfigValueType(name=name)
        self.session.add(value_type)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            # Lost a race with a concurrent add of the same name
            existing = await self.get_by_name(name)
            if existing is None:
                raise ConstraintViolation.from_integrity_error(ConfigValueType.__tablename__, exc)
            return existing
        await self.session.refresh(value_type)
        return value_type

    async def delete(self, value_type_id: int) -> bool:
        """Delete a value type.

        Raises:
            ConstraintViolation: While any default or config value references it.
        """
        if await self.get(value_type_id) is None:
            return False
        try:
            await self.session.execute(
                delete(ConfigValueType).where(ConfigValueType.id == value_type_id)
            )
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(ConfigValueType.__tablename__, exc)
        return True
