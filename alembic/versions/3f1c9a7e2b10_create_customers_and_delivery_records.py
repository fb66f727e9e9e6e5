"""Create customers and delivery_records

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7e2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('name_key', sa.String(length=255), nullable=False),
        sa.Column('customer_type', sa.String(length=16), nullable=False),
        sa.Column('daily_amount', sa.DECIMAL(10, 3), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        # Casefolded name, computed by the application; makes names unique regardless of case
        sa.UniqueConstraint('name_key', name='ux_customers_name_key'),
        sa.CheckConstraint('daily_amount >= 0', name='ck_customers_daily_amount_non_negative'),
    )
    op.create_index('ix_customers_is_active', 'customers', ['is_active'])

    # customer_id is intentionally not a foreign key: deleting a customer keeps its records
    op.create_table(
        'delivery_records',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('customer_id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('morning_amount', sa.DECIMAL(10, 3), nullable=True),
        sa.Column('evening_amount', sa.DECIMAL(10, 3), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_delivery_records_customer_id', 'delivery_records', ['customer_id'])
    op.create_index('ix_delivery_records_date', 'delivery_records', ['date'])


def downgrade() -> None:
    op.drop_index('ix_delivery_records_date', table_name='delivery_records')
    op.drop_index('ix_delivery_records_customer_id', table_name='delivery_records')
    op.drop_table('delivery_records')
    op.drop_index('ix_customers_is_active', table_name='customers')
    op.drop_table('customers')
