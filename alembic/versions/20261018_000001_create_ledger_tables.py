"""Create ledger and indexer state tables.

Revision ID: 20261018_000001
Revises:
Create Date: 2026-10-18

Creates the per-wallet balance ledger (users) and the singleton
indexer checkpoint (indexer_state), seeded at block 0.
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "20261018_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create users and indexer_state tables."""
    op.create_table(
        "users",
        sa.Column("wallet_address", sa.Text(), nullable=False),
        # Base units, unbounded precision
        sa.Column("balance", sa.Numeric(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("wallet_address"),
    )

    op.create_table(
        "indexer_state",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column(
            "last_processed_block",
            sa.BigInteger(),
            nullable=False,
            server_default="0",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("id = 1", name="check_indexer_state_singleton"),
    )

    # Seed the checkpoint; the indexer refuses to start without it
    op.execute(
        "INSERT INTO indexer_state (id, last_processed_block, updated_at) "
        "VALUES (1, 0, NOW())"
    )


def downgrade() -> None:
    """Drop users and indexer_state tables."""
    op.drop_table("indexer_state")
    op.drop_table("users")
