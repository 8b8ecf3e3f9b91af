"""create_environments

Revision ID: c9e3a4b5d6e7
Revises: b8d2f3e4a5c6
Create Date: 2026-10-12 09:10:00.000000
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c9e3a4b5d6e7"
down_revision: Union[str, None] = "b8d2f3e4a5c6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())

    if not inspector.has_table("environments"):
        op.create_table(
            "environments",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("namespace", sa.String(255), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_environments"),
            sa.UniqueConstraint("name", name="uq_environments_name"),
            sqlite_autoincrement=True,
        )

    if not inspector.has_table("environments_config_values"):
        op.create_table(
            "environments_config_values",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("environment_id", sa.Integer(), nullable=False),
            sa.Column("config_value_id", sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_environments_config_values"),
            sa.ForeignKeyConstraint(
                ["environment_id"],
                ["environments.id"],
                name="fk_environments_config_values_environment_id_environments",
                ondelete="CASCADE",
            ),
            sa.ForeignKeyConstraint(
                ["config_value_id"],
                ["config_values.id"],
                name="fk_environments_config_values_config_value_id_config_values",
                ondelete="CASCADE",
            ),
            sqlite_autoincrement=True,
        )
        op.create_index(
            "ix_environments_config_values_environment_id",
            "environments_config_values",
            ["environment_id"],
        )


def downgrade() -> None:
    op.drop_index(
        "ix_environments_config_values_environment_id",
        table_name="environments_config_values",
    )
    op.drop_table("environments_config_values")
    op.drop_table("environments")
