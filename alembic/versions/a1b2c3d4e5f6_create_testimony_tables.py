"""Create testimony tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1b2c3d4e5f6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Create testimonies table
    op.create_table('testimonies',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('author', sa.Text(), nullable=False),
        sa.Column('relationship', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('page', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('chapter', sa.String(length=255), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('page_range', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Page order is the default listing order
    op.create_index('idx_testimonies_page', 'testimonies', ['page'])
    op.create_index('idx_testimonies_category', 'testimonies', ['category'])

    # Create images table
    op.create_table('images',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('path', sa.Text(), nullable=False),
        sa.Column('filename', sa.Text(), nullable=False),
        sa.Column('page', sa.Integer(), nullable=True),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('author', sa.Text(), nullable=True),
        sa.Column('size', sa.Integer(), nullable=True),
        sa.Column('last_modified', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_page_based', sa.Boolean(), nullable=True),
        sa.Column('section_title', sa.Text(), nullable=True),
        sa.Column('section_page', sa.Integer(), nullable=True),
        sa.Column('photo_number', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('path')
    )
    op.create_index('idx_images_page', 'images', ['page'])

    # Create testimony_images association table
    op.create_table('testimony_images',
        sa.Column('testimony_id', sa.String(length=255), nullable=False),
        sa.Column('image_id', sa.Uuid(), nullable=False),
        sa.Column('caption', sa.Text(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['testimony_id'], ['testimonies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['image_id'], ['images.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('testimony_id', 'image_id')
    )


def downgrade():
    op.drop_table('testimony_images')
    op.drop_index('idx_images_page', table_name='images')
    op.drop_table('images')
    op.drop_index('idx_testimonies_category', table_name='testimonies')
    op.drop_index('idx_testimonies_page', table_name='testimonies')
    op.drop_table('testimonies')
