"""Unit tests for table definitions and enums."""

from sqlalchemy import Integer, Text
from sqlalchemy.dialects import mysql, postgresql, sqlite

from template_config.models import ConfigValue, ValueKind
from template_config.schema import config_values_ddl


class TestConfigValueTable:
    """The config_values layout is a fixed contract."""

    table = ConfigValue.__table__

    def test_table_name(self):
        assert self.table.name == "config_values"

    def test_column_order_and_types(self):
        assert [(c.name, type(c.type)) for c in self.table.columns] == [
            ("id", Integer),
            ("section_id", Integer),
            ("cfg_key", Text),
            ("cfg_value", Text),
            ("value_type_id", Integer),
            ("default_id", Integer),
        ]

    def test_no_column_is_nullable(self):
        assert all(not c.nullable for c in self.table.columns)

    def test_primary_key_autoincrements(self):
        assert [c.name for c in self.table.primary_key.columns] == ["id"]
        assert self.table.c.id.autoincrement is True

    def test_only_section_reference_cascades(self):
        fks = {fk.parent.name: fk for fk in self.table.foreign_keys}
        assert fks["section_id"].target_fullname == "config_sections.id"
        assert fks["section_id"].ondelete == "CASCADE"
        assert fks["value_type_id"].target_fullname == "config_value_types.id"
        assert fks["value_type_id"].ondelete is None
        assert fks["default_id"].target_fullname == "config_defaults.id"
        assert fks["default_id"].ondelete is None

    def test_no_uniqueness_on_section_and_key(self):
        assert not any(
            getattr(constraint, "columns", None) is not None
            and {c.name for c in constraint.columns} == {"section_id", "cfg_key"}
            for constraint in self.table.constraints
        )
        assert not any(index.unique for index in self.table.indexes)


class TestConfigValuesDDL:
    def test_sqlite_statement_is_guarded(self):
        ddl = config_values_ddl(sqlite.dialect())
        assert ddl.startswith("CREATE TABLE IF NOT EXISTS config_values")
        assert "AUTOINCREMENT" in ddl
        assert "ON DELETE CASCADE" in ddl

    def test_postgresql_statement_is_guarded(self):
        ddl = config_values_ddl(postgresql.dialect())
        assert ddl.startswith("CREATE TABLE IF NOT EXISTS config_values")
        assert "SERIAL" in ddl
        assert ddl.count("REFERENCES") == 3
        assert ddl.count("ON DELETE CASCADE") == 1

    def test_mysql_statement_is_guarded(self):
        ddl = config_values_ddl(mysql.dialect())
        assert ddl.startswith("CREATE TABLE IF NOT EXISTS config_values")
        assert "AUTO_INCREMENT" in ddl


class TestValueKindEnum:
    def test_all_kinds_defined(self):
        assert {k.value for k in ValueKind} == {"string", "int", "float", "bool"}

    def test_from_string(self):
        assert ValueKind("int") == ValueKind.INT
