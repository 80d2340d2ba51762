"""create clients, fees and payments tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

client_status = sa.Enum("active", "inactive", name="client_status")
fee_category = sa.Enum(
    "Consulting", "License", "Setup", "Training", "Maintenance", "Design", "Support", "Other",
    name="fee_category",
)
fee_status = sa.Enum("pending", "overdue", "paid", name="fee_status")
payment_method = sa.Enum(
    "Bank Transfer", "Credit Card", "Check", "Cash", "PayPal", "Other",
    name="payment_method",
)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("status", client_status, nullable=False),
        sa.Column("total_due", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_paid", sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_clients_id"), "clients", ["id"], unique=False)
    op.create_index(op.f("ix_clients_name"), "clients", ["name"], unique=False)
    op.create_index(op.f("ix_clients_email"), "clients", ["email"], unique=False)
    op.create_index(op.f("ix_clients_status"), "clients", ["status"], unique=False)

    # client_id / fee_id are deliberately not foreign keys: fees outlive
    # deleted clients and payments outlive deleted fees.
    op.create_table(
        "fees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("category", fee_category, nullable=False),
        sa.Column("is_recurring", sa.Boolean(), nullable=False),
        sa.Column("status", fee_status, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_fees_id"), "fees", ["id"], unique=False)
    op.create_index(op.f("ix_fees_client_id"), "fees", ["client_id"], unique=False)
    op.create_index(op.f("ix_fees_due_date"), "fees", ["due_date"], unique=False)
    op.create_index(op.f("ix_fees_status"), "fees", ["status"], unique=False)

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("fee_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=False),
        sa.Column("method", payment_method, nullable=False),
        sa.Column("reference", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_payments_id"), "payments", ["id"], unique=False)
    op.create_index(op.f("ix_payments_fee_id"), "payments", ["fee_id"], unique=False)
    op.create_index(op.f("ix_payments_payment_date"), "payments", ["payment_date"], unique=False)


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_table("fees")
    op.drop_table("clients")
    bind = op.get_bind()
    for enum_type in (payment_method, fee_status, fee_category, client_status):
        enum_type.drop(bind, checkfirst=True)
