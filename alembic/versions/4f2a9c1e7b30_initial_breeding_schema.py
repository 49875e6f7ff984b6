"""initial breeding schema

Revision ID: 4f2a9c1e7b30
Revises:
Create Date: 2026-10-12 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1e7b30'
down_revision = None
branch_labels = None
depends_on = None

NOT_DELETED = "deleted_at IS NULL"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table(
        'individuals',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('kind', sa.String(length=8), nullable=False),
        sa.Column('species', sa.String(length=120), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('sex', sa.String(length=1), nullable=True),
        sa.Column('sale_status', sa.String(length=20), nullable=False, server_default='NOT_FOR_SALE'),
        sa.Column('hatched_on', sa.Date(), nullable=True),
        sa.Column('source_clutch_id', sa.Uuid(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index('ix_individuals_owner_kind', 'individuals', ['owner_id', 'kind'])
    op.create_index('ix_individuals_source_clutch', 'individuals', ['source_clutch_id'])

    op.create_table(
        'matings',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('father_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=True),
        sa.Column('mother_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=True),
        sa.Column('mated_on', sa.Date(), nullable=False),
        sa.Column('species', sa.String(length=120), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index(
        'ux_matings_owner_parents_date',
        'matings',
        ['owner_id', 'father_id', 'mother_id', 'mated_on'],
        unique=True,
        postgresql_where=sa.text(NOT_DELETED),
    )
    op.create_index('ix_matings_owner_date', 'matings', ['owner_id', 'mated_on'])

    op.create_table(
        'clutches',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('mating_id', sa.Uuid(), sa.ForeignKey('matings.id'), nullable=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('species', sa.String(length=120), nullable=False),
        sa.Column('laid_on', sa.Date(), nullable=False),
        sa.Column('clutch_order', sa.Integer(), nullable=False),
        sa.Column('egg_count', sa.Integer(), nullable=True),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index(
        'ux_clutches_mating_date',
        'clutches',
        ['mating_id', 'laid_on'],
        unique=True,
        postgresql_where=sa.text(NOT_DELETED),
    )
    op.create_index(
        'ux_clutches_mating_order',
        'clutches',
        ['mating_id', 'clutch_order'],
        unique=True,
        postgresql_where=sa.text(NOT_DELETED),
    )
    op.create_index('ix_clutches_owner', 'clutches', ['owner_id'])

    op.create_table(
        'eggs',
        sa.Column('id', sa.Uuid(), sa.ForeignKey('individuals.id'), primary_key=True, nullable=False),
        sa.Column('clutch_id', sa.Uuid(), sa.ForeignKey('clutches.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='FERTILIZED'),
        sa.Column('temperature', sa.Float(), nullable=True),
        sa.Column('hatched_individual_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=True),
        sa.Column('hatched_on', sa.Date(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.UniqueConstraint('clutch_id', 'position', name='ux_eggs_clutch_position'),
    )
    op.create_index('ix_eggs_clutch_id', 'eggs', ['clutch_id'])

    op.create_table(
        'parent_link_requests',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('child_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=False),
        sa.Column('parent_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=False),
        sa.Column('role', sa.String(length=8), nullable=False),
        sa.Column('status', sa.String(length=12), nullable=False, server_default='pending'),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('reject_reason', sa.Text(), nullable=True),
        sa.Column('requested_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('decided_by', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('decided_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index(
        'ux_parent_links_pending',
        'parent_link_requests',
        ['child_id', 'parent_id', 'role'],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )
    op.create_index(
        'ux_parent_links_active_role',
        'parent_link_requests',
        ['child_id', 'role'],
        unique=True,
        postgresql_where=sa.text("status IN ('pending', 'approved')"),
    )
    op.create_index('ix_parent_links_parent', 'parent_link_requests', ['parent_id', 'status'])

    op.create_table(
        'adoptions',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('individual_id', sa.Uuid(), sa.ForeignKey('individuals.id'), nullable=False),
        sa.Column('seller_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('buyer_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('price', sa.Numeric(12, 2), nullable=True),
        sa.Column('adopted_on', sa.Date(), nullable=True),
        sa.Column('memo', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=8), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index(
        'ux_adoptions_open_individual',
        'adoptions',
        ['individual_id'],
        unique=True,
        postgresql_where=sa.text("deleted_at IS NULL AND status <> 'SOLD'"),
    )
    op.create_index('ix_adoptions_seller_status', 'adoptions', ['seller_id', 'status'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('sender_id', sa.Uuid(), nullable=True),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('target_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_notifications_user_read', 'notifications', ['user_id', 'read'])
    op.create_index('ix_notifications_type_target', 'notifications', ['type', 'target_id'])


def downgrade() -> None:
    op.drop_table('notifications')
    op.drop_table('adoptions')
    op.drop_table('parent_link_requests')
    op.drop_table('eggs')
    op.drop_table('clutches')
    op.drop_table('matings')
    op.drop_table('individuals')
    op.drop_table('users')
