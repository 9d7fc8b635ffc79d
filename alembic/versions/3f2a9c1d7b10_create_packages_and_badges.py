"""create packages and package_badges

Revision ID: 3f2a9c1d7b10
Revises: 
Create Date: 2026-10-18 18:02:11.412301

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_packages')),
    )
    op.create_index(op.f('ix_packages_id'), 'packages', ['id'], unique=False)
    op.create_index(op.f('ix_packages_name'), 'packages', ['name'], unique=True)

    op.create_table(
        'package_badges',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('package_id', sa.Integer(), nullable=False),
        sa.Column('badge_type', sa.String(length=64), nullable=False),
        sa.Column('attributes', sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(
            ['package_id'], ['packages.id'],
            name=op.f('fk_package_badges_package_id_packages'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_package_badges')),
        sa.UniqueConstraint('package_id', 'badge_type', name='uq_package_badge_type'),
    )
    op.create_index(op.f('ix_package_badges_package_id'), 'package_badges', ['package_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_package_badges_package_id'), table_name='package_badges')
    op.drop_table('package_badges')
    op.drop_index(op.f('ix_packages_name'), table_name='packages')
    op.drop_index(op.f('ix_packages_id'), table_name='packages')
    op.drop_table('packages')
