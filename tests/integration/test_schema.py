"""Schema bootstrap tests: re-applying the definition is a no-op."""

import pytest
from sqlalchemy import inspect

from template_config.repositories import ConfigValueRepository
from template_config.schema import apply_schema
from tests.helpers.schema import describe_schema

pytestmark = pytest.mark.asyncio


class TestApplySchema:
    async def test_creates_all_tables_on_an_empty_database(self, engine):
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda c: set(inspect(c).get_table_names()))

        assert {
            "config_sections",
            "config_value_types",
            "config_defaults",
            "config_values",
            "environments",
            "environments_config_values",
        } <= tables

    async def test_reapplying_is_a_noop(self, engine):
        async with engine.connect() as conn:
            before = await conn.run_sync(describe_schema)

        created = await apply_schema(engine)

        async with engine.connect() as conn:
            after = await conn.run_sync(describe_schema)
        assert created == []
        assert before == after

    async def test_reapplying_keeps_existing_rows(self, engine, db_session, parents):
        value_id = await ConfigValueRepository(db_session).create(
            parents.section_ids[0], "timeout", "30", parents.value_type_ids["int"], 1
        )
        await db_session.commit()

        await apply_schema(engine)

        assert await ConfigValueRepository(db_session).get(value_id) is not None

    async def test_config_values_layout(self, engine):
        async with engine.connect() as conn:
            columns, foreign_keys = (await conn.run_sync(describe_schema))["config_values"]

        assert [(name, nullable) for name, _, nullable in columns] == [
            ("id", False),
            ("section_id", False),
            ("cfg_key", False),
            ("cfg_value", False),
            ("value_type_id", False),
            ("default_id", False),
        ]
        assert foreign_keys == [
            ("default_id", "config_defaults", None),
            ("section_id", "config_sections", "CASCADE"),
            ("value_type_id", "config_value_types", None),
        ]
