"""Create dashboard tables

Revision ID: 001
Revises: None
Create Date: 2024-03-02 00:00:00.000000+00:00

What:  Creates configs, categories, services, notes, links and themes.
Rollback: downgrade() drops all six tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "configs",
        sa.Column("id", sa.String(200), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=True),
        sa.Column("columns", sa.Integer(), nullable=False, server_default=sa.text("4")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("url", sa.String(2048), nullable=False, server_default=sa.text("'#'")),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("target", sa.String(10), nullable=False, server_default=sa.text("'_blank'")),
        sa.Column(
            "logo",
            sa.String(255),
            nullable=False,
            server_default=sa.text("'logoPlaceHolder.png'"),
        ),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_services_category_id", "services", ["category_id"])

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("config_id", sa.String(200), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.ForeignKeyConstraint(["config_id"], ["configs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notes_config_id", "notes", ["config_id"])

    op.create_table(
        "links",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("label", sa.String(200), nullable=False),
        sa.Column("url", sa.String(2048), nullable=False),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("target", sa.String(10), nullable=False, server_default=sa.text("'_blank'")),
        sa.Column("position", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("config_id", sa.String(200), nullable=False),
        sa.ForeignKeyConstraint(["config_id"], ["configs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_links_config_id", "links", ["config_id"])

    op.create_table(
        "themes",
        sa.Column("id", sa.String(100), nullable=False),
        sa.Column("config_id", sa.String(200), nullable=True),
        sa.Column("background", sa.JSON(), nullable=False),
        sa.Column("text", sa.JSON(), nullable=False),
        sa.Column("border", sa.JSON(), nullable=False),
        sa.Column("accent", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["config_id"], ["configs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_themes_config_id", "themes", ["config_id"])


def downgrade() -> None:
    op.drop_index("ix_themes_config_id", table_name="themes")
    op.drop_table("themes")
    op.drop_index("ix_links_config_id", table_name="links")
    op.drop_table("links")
    op.drop_index("ix_notes_config_id", table_name="notes")
    op.drop_table("notes")
    op.drop_index("ix_services_category_id", table_name="services")
    op.drop_table("services")
    op.drop_table("categories")
    op.drop_table("configs")
