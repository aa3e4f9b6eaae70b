"""Initial schema - reference data, people, users and roles.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_by", sa.String(100), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _coded_table(name: str, code_length: int) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(code_length), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=False, unique=True),
        *_audit_columns(),
    )


def upgrade() -> None:
    op.create_table(
        "country",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(2), nullable=False, unique=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("year", sa.Text, nullable=True),
        sa.Column("cctld", sa.Text, nullable=True),
        *_audit_columns(),
    )
    _coded_table("gender", 1)
    _coded_table("title", 5)
    id_type = sa.table(
        "id_type",
        sa.column("code", sa.String),
        sa.column("description", sa.Text),
    )
    _coded_table("id_type", 5)

    op.create_table(
        "person",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True, unique=True),
        sa.Column("id_number", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("title_id", sa.Integer, sa.ForeignKey("title.id"), nullable=True),
        sa.Column("gender_id", sa.Integer, sa.ForeignKey("gender.id"), nullable=True),
        sa.Column("id_type_id", sa.Integer, sa.ForeignKey("id_type.id"), nullable=True),
        *_audit_columns(),
    )

    role = op.create_table(
        "role",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=False, unique=True),
        *_audit_columns(),
    )

    op.create_table(
        "user_login",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("person_id", sa.Integer, sa.ForeignKey("person.id"), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "user_role",
        sa.Column("user_id", sa.Integer, sa.ForeignKey("user_login.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("role_id", sa.Integer, sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
    )

    op.bulk_insert(role, [
        {"name": "ROLE_USER", "description": "Standard user", "created_by": "migration"},
        {"name": "ROLE_ADMIN", "description": "Administrator", "created_by": "migration"},
    ])
    op.bulk_insert(id_type, [
        {"code": "ID", "description": "National identity number", "created_by": "migration"},
    ])


def downgrade() -> None:
    op.drop_table("user_role")
    op.drop_table("user_login")
    op.drop_table("role")
    op.drop_table("person")
    op.drop_table("id_type")
    op.drop_table("title")
    op.drop_table("gender")
    op.drop_table("country")
