"""initial schema

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "3f1a9c2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "fees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(26), nullable=False, unique=True),
        sa.Column("fee_type", sa.String(32), nullable=False),
        sa.Column("amount", sa.Integer, nullable=False, server_default="0"),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("month", sa.Integer, nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("compulsory", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_fees_period", "fees", ["year", "month"])

    op.create_table(
        "apartments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("number", sa.String(32), nullable=False, unique=True),
        sa.Column("floor", sa.Integer, nullable=False, server_default="0"),
        sa.Column("area", sa.Integer, nullable=False),
    )

    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "apartment_id", sa.Integer, sa.ForeignKey("apartments.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("plate", sa.String(32), nullable=False, server_default=""),
        sa.Column("category", sa.String(16), nullable=False),
    )

    op.create_table(
        "residents",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(26), nullable=False, unique=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("gender", sa.String(16), nullable=False, server_default=""),
        sa.Column("phone", sa.String(32), nullable=False, server_default=""),
        sa.Column("apartment_id", sa.Integer, sa.ForeignKey("apartments.id"), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(26), nullable=False, unique=True),
        sa.Column("fee_id", sa.Integer, sa.ForeignKey("fees.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "resident_id", sa.Integer, sa.ForeignKey("residents.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("amount_paid", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.Text, nullable=False),
        sa.Column("date_paid", sa.Date, nullable=True),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_payments_fee_id", "payments", ["fee_id"])
    op.create_index("ix_payments_resident_id", "payments", ["resident_id"])


def downgrade() -> None:
    op.drop_index("ix_payments_resident_id", table_name="payments")
    op.drop_index("ix_payments_fee_id", table_name="payments")
    op.drop_table("payments")
    op.drop_table("residents")
    op.drop_table("vehicles")
    op.drop_table("apartments")
    op.drop_index("ix_fees_period", table_name="fees")
    op.drop_table("fees")
