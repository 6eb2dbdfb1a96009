"""Initial gallery schema

Revision ID: 20251109_initial
Revises: 
Create Date: 2025-11-09 23:32:07.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20251109_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# TEXT[] on PostgreSQL, JSON text elsewhere
text_array = postgresql.ARRAY(sa.Text()).with_variant(sa.JSON(none_as_null=True), 'sqlite')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'Component',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('tags', text_array, nullable=True),
        sa.Column('filePath', sa.Text(), nullable=False),
        sa.Column('componentPath', sa.Text(), nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('dependencies', text_array, nullable=True),
        sa.Column('responsive', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('darkMode', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('views', sa.Integer(), server_default='0', nullable=False),
        sa.Column('copies', sa.Integer(), server_default='0', nullable=False),
        sa.Column('createdAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updatedAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='Component_pkey'),
    )
    op.create_index('Component_category_idx', 'Component', ['category'])
    op.create_index('Component_tags_idx', 'Component', ['tags'])

    op.create_table(
        'Favorite',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('userId', sa.Text(), nullable=False),
        sa.Column('componentId', sa.String(), nullable=False),
        sa.Column('createdAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['componentId'], ['Component.id'],
            name='Favorite_componentId_fkey',
            ondelete='CASCADE', onupdate='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='Favorite_pkey'),
    )
    op.create_index('Favorite_userId_idx', 'Favorite', ['userId'])
    op.create_index('Favorite_userId_componentId_key', 'Favorite', ['userId', 'componentId'], unique=True)

    op.create_table(
        'ComponentVersion',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('componentId', sa.String(), nullable=False),
        sa.Column('version', sa.Text(), nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('changelog', sa.Text(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['componentId'], ['Component.id'],
            name='ComponentVersion_componentId_fkey',
            ondelete='CASCADE', onupdate='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='ComponentVersion_pkey'),
    )
    op.create_index('ComponentVersion_componentId_idx', 'ComponentVersion', ['componentId'])

    op.create_table(
        'User',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('role', sa.Text(), server_default='user', nullable=False),
        sa.Column('createdAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updatedAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='User_pkey'),
    )
    op.create_index('User_email_key', 'User', ['email'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('User_email_key', table_name='User')
    op.drop_table('User')
    op.drop_index('ComponentVersion_componentId_idx', table_name='ComponentVersion')
    op.drop_table('ComponentVersion')
    op.drop_index('Favorite_userId_componentId_key', table_name='Favorite')
    op.drop_index('Favorite_userId_idx', table_name='Favorite')
    op.drop_table('Favorite')
    op.drop_index('Component_tags_idx', table_name='Component')
    op.drop_index('Component_category_idx', table_name='Component')
    op.drop_table('Component')
