"""Config value store tests against a real (in-memory SQLite) database.

Foreign keys are enforced, so these exercise the actual NOT NULL, foreign
key and cascade behaviour of the schema.
"""

import pytest
from sqlalchemy import func, select

from template_config.filters.config_value import ConfigValueFilter
from template_config.models import ConfigDefault, ConfigSection, ConfigValue
from template_config.repositories import (
    ConfigValueRepository,
    ConstraintViolation,
    DefaultRepository,
    SectionRepository,
    ValueTypeRepository,
)
from template_config.schemas.config_value import ConfigValueUpdate

pytestmark = pytest.mark.asyncio


async def _count_values(session, **criteria) -> int:
    query = select(func.count()).select_from(ConfigValue)
    for column, value in criteria.items():
        query = query.where(getattr(ConfigValue, column) == value)
    return await session.scalar(query)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


class TestCreate:
    """Create(section_id, cfg_key, cfg_value, value_type_id, default_id)."""

    async def test_ids_are_assigned_in_order_and_never_deduplicated(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        int_type = parents.value_type_ids["int"]

        first = await repo.create(1, "timeout", "30", int_type, 5)
        second = await repo.create(1, "timeout", "30", int_type, 5)
        await db_session.commit()

        assert int_type == 2
        assert (first, second) == (1, 2)
        assert await _count_values(db_session, cfg_key="timeout") == 2

    async def test_created_row_holds_every_field(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        value_id = await repo.create(
            parents.section_ids[0], "port", "5432", parents.value_type_ids["int"], 2
        )
        await db_session.commit()

        value = await repo.get(value_id)
        assert value is not None
        assert value.section_id == parents.section_ids[0]
        assert value.cfg_key == "port"
        assert value.cfg_value == "5432"
        assert value.value_type_id == parents.value_type_ids["int"]
        assert value.default_id == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            {"section_id": 999},
            {"value_type_id": 999},
            {"default_id": 999},
        ],
        ids=["missing-section", "missing-value-type", "missing-default"],
    )
    async def test_missing_parent_raises_and_persists_nothing(self, db_session, parents, overrides):
        repo = ConfigValueRepository(db_session)
        args = {
            "section_id": parents.section_ids[0],
            "cfg_key": "timeout",
            "cfg_value": "30",
            "value_type_id": parents.value_type_ids["int"],
            "default_id": parents.default_ids[0],
        }
        args.update(overrides)

        with pytest.raises(ConstraintViolation) as exc_info:
            await repo.create(**args)

        assert exc_info.value.table == "config_values"
        assert await _count_values(db_session) == 0

    @pytest.mark.parametrize("missing", ["section_id", "cfg_key", "cfg_value", "value_type_id", "default_id"])
    async def test_absent_field_raises(self, db_session, parents, missing):
        repo = ConfigValueRepository(db_session)
        args = {
            "section_id": parents.section_ids[0],
            "cfg_key": "timeout",
            "cfg_value": "30",
            "value_type_id": parents.value_type_ids["int"],
            "default_id": parents.default_ids[0],
        }
        args[missing] = None

        with pytest.raises(ConstraintViolation):
            await repo.create(**args)

        assert await _count_values(db_session) == 0

    async def test_ids_are_not_reused_after_delete(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        args = (parents.section_ids[0], "k", "v", parents.value_type_ids["string"], 1)

        first = await repo.create(*args)
        await db_session.commit()
        assert await repo.delete(first) is True
        await db_session.commit()

        second = await repo.create(*args)
        await db_session.commit()

        assert second > first

    async def test_duplicate_keys_in_a_section_are_allowed(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        section_id = parents.section_ids[0]

        await repo.create(section_id, "host", "a", parents.value_type_ids["string"], 1)
        await repo.create(section_id, "host", "b", parents.value_type_ids["string"], 1)
        await db_session.commit()

        values = await repo.list_for_section(section_id)
        assert [v.cfg_value for v in values] == ["a", "b"]


# ---------------------------------------------------------------------------
# DeleteSection (cascade)
# ---------------------------------------------------------------------------


class TestDeleteSection:
    async def test_removes_every_owned_value_and_no_others(self, db_session, parents):
        values = ConfigValueRepository(db_session)
        # The kept section owns the defaults both sections point at
        kept, doomed = parents.section_ids
        string_type = parents.value_type_ids["string"]

        doomed_ids = [await values.create(doomed, f"k{i}", "v", string_type, 1) for i in range(3)]
        kept_ids = [await values.create(kept, f"k{i}", "v", string_type, 1) for i in range(2)]
        await db_session.commit()

        deleted = await SectionRepository(db_session).delete(doomed)
        await db_session.commit()

        assert deleted == 3
        assert await _count_values(db_session, section_id=doomed) == 0
        assert await _count_values(db_session, section_id=kept) == 2
        for value_id in doomed_ids:
            assert await values.get(value_id) is None
        for value_id in kept_ids:
            assert await values.get(value_id) is not None

    async def test_edits_to_other_sections_survive_the_delete(
        self, db_session, session_factory, parents
    ):
        values = ConfigValueRepository(db_session)
        kept, doomed = parents.section_ids
        string_type = parents.value_type_ids["string"]
        kept_id = await values.create(kept, "host", "old", string_type, 1)
        await values.create(doomed, "host", "gone", string_type, 1)
        await db_session.commit()

        kept_value = await values.get(kept_id)
        await SectionRepository(db_session).delete(doomed)
        kept_value.cfg_value = "new"
        await db_session.commit()

        async with session_factory() as fresh:
            reloaded = await ConfigValueRepository(fresh).get(kept_id)
        assert reloaded.cfg_value == "new"

    async def test_also_removes_the_sections_defaults(self, db_session, parents):
        section_id = parents.section_ids[0]

        await SectionRepository(db_session).delete(section_id)
        await db_session.commit()

        remaining = await db_session.scalar(
            select(func.count()).select_from(ConfigDefault).where(
                ConfigDefault.section_id == section_id
            )
        )
        assert remaining == 0

    async def test_unknown_section_returns_none(self, db_session, parents):
        assert await SectionRepository(db_session).delete(999) is None

    async def test_delete_by_name(self, db_session, parents):
        repo = SectionRepository(db_session)
        assert await repo.delete_by_name("ingress") == 0
        await db_session.commit()
        assert await repo.list_names() == ["database"]


# ---------------------------------------------------------------------------
# DeleteValueType / DeleteDefault (no cascade)
# ---------------------------------------------------------------------------


class TestDeleteReferencedParents:
    async def test_referenced_value_type_cannot_be_deleted(self, db_session, parents):
        int_type = parents.value_type_ids["int"]
        value_id = await ConfigValueRepository(db_session).create(
            parents.section_ids[1], "timeout", "30", int_type, 1
        )
        await db_session.commit()

        with pytest.raises(ConstraintViolation) as exc_info:
            await ValueTypeRepository(db_session).delete(int_type)

        assert exc_info.value.table == "config_value_types"
        value = await ConfigValueRepository(db_session).get(value_id)
        assert value is not None
        assert value.value_type_id == int_type
        assert value.cfg_value == "30"

    async def test_referenced_default_cannot_be_deleted(self, db_session, parents):
        default_id = parents.default_ids[2]
        value_id = await ConfigValueRepository(db_session).create(
            parents.section_ids[1], "timeout", "30", parents.value_type_ids["int"], default_id
        )
        await db_session.commit()

        with pytest.raises(ConstraintViolation):
            await DefaultRepository(db_session).delete(default_id)

        value = await ConfigValueRepository(db_session).get(value_id)
        assert value is not None
        assert value.default_id == default_id
        assert await DefaultRepository(db_session).get(default_id) is not None

    async def test_unreferenced_value_type_can_be_deleted(self, db_session, parents):
        repo = ValueTypeRepository(db_session)
        assert await repo.delete(parents.value_type_ids["float"]) is True
        await db_session.commit()
        assert await repo.get_by_name("float") is None

    async def test_unreferenced_default_can_be_deleted(self, db_session, parents):
        repo = DefaultRepository(db_session)
        assert await repo.delete(parents.default_ids[-1]) is True
        assert await repo.delete(999) is False


# ---------------------------------------------------------------------------
# Read / Update
# ---------------------------------------------------------------------------


class TestReadAndUpdate:
    async def test_get_all_filters_and_paginates(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        string_type = parents.value_type_ids["string"]
        for i in range(4):
            await repo.create(parents.section_ids[0], f"k{i}", "v", string_type, 1)
        await repo.create(parents.section_ids[1], "other", "v", string_type, 1)
        await db_session.commit()

        items, total = await repo.get_all(
            ConfigValueFilter(section_id=parents.section_ids[0]), page=2, size=3
        )

        assert total == 4
        assert [v.cfg_key for v in items] == ["k3"]

    async def test_update_changes_only_given_fields(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        value_id = await repo.create(
            parents.section_ids[0], "timeout", "30", parents.value_type_ids["int"], 1
        )
        await db_session.commit()

        updated = await repo.update(value_id, ConfigValueUpdate(cfg_value="60"))
        await db_session.commit()

        assert updated is not None
        assert updated.cfg_value == "60"
        assert updated.cfg_key == "timeout"

    async def test_update_to_missing_parent_raises(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        value_id = await repo.create(
            parents.section_ids[0], "timeout", "30", parents.value_type_ids["int"], 1
        )
        await db_session.commit()

        with pytest.raises(ConstraintViolation):
            await repo.update(value_id, ConfigValueUpdate(default_id=999))

        value = await repo.get(value_id)
        assert value is not None
        assert value.default_id == 1

    async def test_update_unknown_returns_none(self, db_session, parents):
        repo = ConfigValueRepository(db_session)
        assert await repo.update(999, ConfigValueUpdate(cfg_value="x")) is None


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class TestSections:
    async def test_add_is_idempotent_by_name(self, db_session, parents):
        repo = SectionRepository(db_session)
        again = await repo.add("database")
        await db_session.commit()

        assert again.id == parents.section_ids[0]
        total = await db_session.scalar(select(func.count()).select_from(ConfigSection))
        assert total == 2

    async def test_list_names(self, db_session, parents):
        assert await SectionRepository(db_session).list_names() == ["database", "ingress"]

    @pytest.mark.parametrize(
        "repo_class, name, parent_key",
        [
            (SectionRepository, "ingress", "section"),
            (ValueTypeRepository, "int", "value_type"),
        ],
    )
    async def test_add_losing_a_race_returns_the_winner(
        self, db_session, parents, monkeypatch, repo_class, name, parent_key
    ):
        repo = repo_class(db_session)
        lookup = repo.get_by_name
        calls = []

        async def stale_lookup(looked_up):
            # The first lookup runs before the concurrent insert commits
            calls.append(looked_up)
            return None if len(calls) == 1 else await lookup(looked_up)

        monkeypatch.setattr(repo, "get_by_name", stale_lookup)

        added = await repo.add(name)

        expected = (
            parents.section_ids[1] if parent_key == "section" else parents.value_type_ids[name]
        )
        assert added.id == expected
        assert len(calls) == 2
