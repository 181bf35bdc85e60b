"""Costing tables: units, conversions, ingredients, recipes

Revision ID: 3b7e21c4d9a0
Revises:
Create Date: 2026-10-17 09:12:44.118203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e21c4d9a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'unit',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=False),
        sa.Column('dimension', sa.String(length=20), nullable=False),
        sa.Column('factor_to_base', sa.Numeric(precision=15, scale=6), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('restaurant_id', 'code', name='unique_unit_code_per_restaurant'),
    )
    with op.batch_alter_table('unit', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_unit_restaurant_id'), ['restaurant_id'], unique=False)

    op.create_table(
        'universal_conversion',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('from_unit', sa.String(length=50), nullable=False),
        sa.Column('to_unit', sa.String(length=50), nullable=False),
        sa.Column('factor', sa.Numeric(precision=15, scale=6), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('universal_conversion', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_universal_conversion_restaurant_id'), ['restaurant_id'], unique=False)

    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('storage_unit', sa.String(length=50), nullable=False),
        sa.Column('cost_per_storage_unit', sa.Numeric(precision=10, scale=4), nullable=False),
        sa.Column('piece_weight_oz', sa.Numeric(precision=10, scale=4), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_ingredient_restaurant_id'), ['restaurant_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_ingredient_name'), ['name'], unique=False)

    op.create_table(
        'ingredient_conversion',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('from_unit', sa.String(length=50), nullable=False),
        sa.Column('to_unit', sa.String(length=50), nullable=False),
        sa.Column('factor', sa.Numeric(precision=15, scale=6), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('ingredient_conversion', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_ingredient_conversion_restaurant_id'), ['restaurant_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_ingredient_conversion_ingredient_id'), ['ingredient_id'], unique=False)

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('restaurant_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.Column('selling_price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_restaurant_id'), ['restaurant_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipe_name'), ['name'], unique=False)

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=10, scale=4), nullable=False),
        sa.Column('unit', sa.String(length=50), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredient_recipe_id'), ['recipe_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipe_ingredient_ingredient_id'), ['ingredient_id'], unique=False)


def downgrade():
    op.drop_table('recipe_ingredient')
    op.drop_table('recipe')
    op.drop_table('ingredient_conversion')
    op.drop_table('ingredient')
    op.drop_table('universal_conversion')
    op.drop_table('unit')
