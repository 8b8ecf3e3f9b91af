"""Schema reflection helper shared by the bootstrap and migration tests."""

from sqlalchemy import inspect


def describe_schema(connection, exclude=("alembic_version",)):
    """Column layout and foreign keys of every table, keyed by table name."""
    inspector = inspect(connection)
    return {
        table: (
            [(c["name"], str(c["type"]), c["nullable"]) for c in inspector.get_columns(table)],
            sorted(
                (fk["constrained_columns"][0], fk["referred_table"], fk["options"].get("ondelete"))
                for fk in inspector.get_foreign_keys(table)
            ),
        )
        for table in inspector.get_table_names()
        if table not in exclude
    }
