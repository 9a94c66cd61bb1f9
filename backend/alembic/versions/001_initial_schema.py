"""Initial schema: tenants, users, venues, acts, shows, ticket offers.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "tenants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tenant_identifier", sa.String(100), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
    )
    op.create_index("ix_tenants_id", "tenants", ["id"])
    op.create_index("ix_tenants_slug", "tenants", ["slug"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tenant_id", sa.Integer(), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_tenant_id", "users", ["tenant_id"])
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "venues",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tenant_id", sa.Integer(), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(300), nullable=True),
        sa.Column("description", sa.String(2000), nullable=False, server_default=""),
        sa.Column("seating_capacity", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("seating_capacity > 0", name="check_venue_seating_capacity_positive"),
    )
    op.create_index("ix_venues_id", "venues", ["id"])
    op.create_index("ix_venues_tenant_name", "venues", ["tenant_id", "name"])

    op.create_table(
        "acts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tenant_id", sa.Integer(), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_acts_id", "acts", ["id"])
    op.create_index("ix_acts_tenant_name", "acts", ["tenant_id", "name"])

    op.create_table(
        "shows",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("venue_id", sa.Integer(), sa.ForeignKey("venues.id", ondelete="CASCADE"), nullable=False),
        sa.Column("act_id", sa.Integer(), sa.ForeignKey("acts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("total_tickets", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        *_timestamps(),
        sa.CheckConstraint("total_tickets >= 0", name="check_show_total_tickets_non_negative"),
    )
    op.create_index("ix_shows_id", "shows", ["id"])
    op.create_index("ix_shows_act_id", "shows", ["act_id"])
    op.create_index("ix_shows_venue_start_time", "shows", ["venue_id", "start_time"])

    # The capacity invariant itself (sum of offers <= show.total_tickets) spans
    # rows and is enforced by the application's capacity ledger; the checks
    # below only backstop the per-row rules.
    op.create_table(
        "ticket_offers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("show_id", sa.Integer(), sa.ForeignKey("shows.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("ticket_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("price > 0", name="check_ticket_offer_price_positive"),
        sa.CheckConstraint("ticket_count > 0", name="check_ticket_offer_ticket_count_positive"),
    )
    op.create_index("ix_ticket_offers_id", "ticket_offers", ["id"])
    op.create_index("ix_ticket_offers_show_id", "ticket_offers", ["show_id"])


def downgrade() -> None:
    op.drop_table("ticket_offers")
    op.drop_table("shows")
    op.drop_table("acts")
    op.drop_table("venues")
    op.drop_table("users")
    op.drop_table("tenants")
