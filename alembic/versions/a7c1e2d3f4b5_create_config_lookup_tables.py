"""create_config_lookup_tables

Revision ID: a7c1e2d3f4b5
Revises:
Create Date: 2026-10-12 09:00:00.000000

Creates the tables config values point at: sections, value types and
defaults. Each table is created only when absent.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a7c1e2d3f4b5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade() -> None:
    if not _has_table("config_sections"):
        op.create_table(
            "config_sections",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(255), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_config_sections"),
            sa.UniqueConstraint("name", name="uq_config_sections_name"),
            sqlite_autoincrement=True,
        )

    if not _has_table("config_value_types"):
        op.create_table(
            "config_value_types",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(255), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_config_value_types"),
            sa.UniqueConstraint("name", name="uq_config_value_types_name"),
            sqlite_autoincrement=True,
        )

        # Seed the kinds the renderer understands
        op.execute(
            "INSERT INTO config_value_types (name) VALUES "
            "('string'), ('int'), ('float'), ('bool')"
        )

    if not _has_table("config_defaults"):
        op.create_table(
            "config_defaults",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("section_id", sa.Integer(), nullable=False),
            sa.Column("cfg_key", sa.Text(), nullable=False),
            sa.Column("cfg_value", sa.Text(), nullable=False),
            sa.Column("value_type_id", sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_config_defaults"),
            sa.ForeignKeyConstraint(
                ["section_id"],
                ["config_sections.id"],
                name="fk_config_defaults_section_id_config_sections",
                ondelete="CASCADE",
            ),
            sa.ForeignKeyConstraint(
                ["value_type_id"],
                ["config_value_types.id"],
                name="fk_config_defaults_value_type_id_config_value_types",
            ),
            sqlite_autoincrement=True,
        )
        op.create_index(
            "ix_config_defaults_section_id", "config_defaults", ["section_id"]
        )


def downgrade() -> None:
    op.drop_index("ix_config_defaults_section_id", table_name="config_defaults")
    op.drop_table("config_defaults")
    op.drop_table("config_value_types")
    op.drop_table("config_sections")
