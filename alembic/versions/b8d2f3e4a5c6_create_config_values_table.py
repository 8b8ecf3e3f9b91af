"""create_config_values_table

Revision ID: b8d2f3e4a5c6
Revises: a7c1e2d3f4b5
Create Date: 2026-10-12 09:05:00.000000

Records of config values used to render a template. Deleting a section
cascades to its values; value types and defaults cannot be deleted while
referenced.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b8d2f3e4a5c6"
down_revision: Union[str, None] = "a7c1e2d3f4b5"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    if sa.inspect(op.get_bind()).has_table("config_values"):
        return

    op.create_table(
        "config_values",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("section_id", sa.Integer(), nullable=False),
        sa.Column("cfg_key", sa.Text(), nullable=False),
        sa.Column("cfg_value", sa.Text(), nullable=False),
        sa.Column("value_type_id", sa.Integer(), nullable=False),
        sa.Column("default_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_config_values"),
        sa.ForeignKeyConstraint(
            ["section_id"],
            ["config_sections.id"],
            name="fk_config_values_section_id_config_sections",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["value_type_id"],
            ["config_value_types.id"],
            name="fk_config_values_value_type_id_config_value_types",
        ),
        sa.ForeignKeyConstraint(
            ["default_id"],
            ["config_defaults.id"],
            name="fk_config_values_default_id_config_defaults",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_config_values_section_id", "config_values", ["section_id"])


def downgrade() -> None:
    op.drop_index("ix_config_values_section_id", table_name="config_values")
    op.drop_table("config_values")
