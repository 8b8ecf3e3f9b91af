"""Idempotent schema bootstrap.

Tables are created only when absent, parents before children, so applying
the schema to an existing database is a no-op.
"""

import logging

from sqlalchemy import Connection, inspect
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.schema import CreateTable

import template_config.models  # noqa: F401  registers every table on Base.metadata
from template_config.models.base import Base
from template_config.models.config_value import ConfigValue

logger = logging.getLogger(__name__)


def _create_missing(connection: Connection) -> list[str]:
    existing = set(inspect(connection).get_table_names())
    created = [t.name for t in Base.metadata.sorted_tables if t.name not in existing]
    Base.metadata.create_all(connection, checkfirst=True)
    return created


async def apply_schema(engine: AsyncEngine) -> list[str]:
    """Create every missing table and return the names of those created."""
    async with engine.begin() as conn:
        created = await conn.run_sync(_create_missing)
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    else:
        logger.info("Schema already up to date")
    return created


def config_values_ddl(dialect: Dialect) -> str:
    """Render the guarded ``CREATE TABLE IF NOT EXISTS config_values`` statement."""
    statement = CreateTable(ConfigValue.__table__, if_not_exists=True)
    return str(statement.compile(dialect=dialect)).strip()
