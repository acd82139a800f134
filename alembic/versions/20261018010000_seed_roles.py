"""Seed the fixed set of roles.

Revision ID: 20261018010000
Revises: 20261018000000
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261018010000"
down_revision: Union[str, None] = "20261018000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE_NAMES = ("ROLE_USER", "ROLE_MODERATOR", "ROLE_ADMIN")

roles_table = sa.table(
    "roles",
    sa.column("name", sa.Enum(*ROLE_NAMES, name="role_name")),
)


def upgrade() -> None:
    op.bulk_insert(roles_table, [{"name": name} for name in ROLE_NAMES])


def downgrade() -> None:
    op.execute(roles_table.delete().where(roles_table.c.name.in_(ROLE_NAMES)))
