"""Repository for deployment environments."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from template_config.models.config_value import ConfigValue
from template_config.models.environment import Environment, EnvironmentConfigValue
from template_config.repositories.exceptions import ConstraintViolation


class EnvironmentRepository:
    """Data access layer for environments and their bound config values."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Environment | None:
        result = await self.session.execute(select(Environment).where(Environment.name == name))
        return result.scalar_one_or_none()

    async def get_id(self, name: str) -> int | None:
        result = await self.session.execute(select(Environment.id).where(Environment.name == name))
        return result.scalar_one_or_none()

    async def upsert(self, name: str, namespace: str) -> Environment:
        """Insert an environment; an existing one keeps its stored namespace."""
        environment = await self.get_by_name(name)
        if environment is not None:
            return environment

        environment = Environment(name=name, namespace=namespace)
        self.session.add(environment)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            existing = await self.get_by_name(name)
            if existing is None:
                raise ConstraintViolation.from_integrity_error(Environment.__tablename__, exc)
            return existing
        await self.session.refresh(environment)
        return environment

    async def add_config_value(self, environment_id: int, config_value_id: int) -> int:
        """Bind a config value to an environment and return the link id.

        Raises:
            ConstraintViolation: If the environment or config value is missing.
        """
        link = EnvironmentConfigValue(
            environment_id=environment_id, config_value_id=config_value_id
        )
        self.session.add(link)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation.from_integrity_error(
                EnvironmentConfigValue.__tablename__, exc
            )
        return link.id

    async def list_config_values(self, environment_id: int) -> list[ConfigValue]:
        result = await self.session.execute(
            select(ConfigValue)
            .join(
                EnvironmentConfigValue,
                EnvironmentConfigValue.config_value_id == ConfigValue.id,
            )
            .where(EnvironmentConfigValue.environment_id == environment_id)
            .order_by(ConfigValue.id)
        )
        return list(result.scalars().all())
