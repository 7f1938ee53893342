"""Initial coaching schema

Revision ID: 3b7e1c9d2a41
Revises:
Create Date: 2026-10-18 09:12:44.518201

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e1c9d2a41'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('protein', sa.Float(), nullable=True),
        sa.Column('carbs', sa.Float(), nullable=True),
        sa.Column('fat', sa.Float(), nullable=True),
        sa.Column('fiber', sa.Float(), nullable=True),
        sa.Column('sugar', sa.Float(), nullable=True),
        sa.Column('salt', sa.Float(), nullable=True),
        sa.Column('ml_density_g_per_ml', sa.Float(), nullable=True),
        sa.Column('grams_per_piece', sa.Float(), nullable=True),
        sa.Column('grams_per_hand', sa.Float(), nullable=True),
        sa.Column('grams_per_teaspoon', sa.Float(), nullable=True),
        sa.Column('grams_per_tablespoon', sa.Float(), nullable=True),
        sa.Column('grams_per_pinch', sa.Float(), nullable=True),
        sa.Column('grams_per_cup', sa.Float(), nullable=True),
        sa.Column('grams_per_slice', sa.Float(), nullable=True),
        sa.Column('grams_per_bunch', sa.Float(), nullable=True),
        sa.Column('grams_per_can', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ingredient')),
    )
    op.create_index('ix_ingredient_name', 'ingredient', ['name'], unique=True)

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('nutrition_calories', sa.Float(), nullable=True),
        sa.Column('nutrition_protein', sa.Float(), nullable=True),
        sa.Column('nutrition_carbs', sa.Float(), nullable=True),
        sa.Column('nutrition_fat', sa.Float(), nullable=True),
        sa.Column('nutrition_fiber', sa.Float(), nullable=True),
        sa.Column('nutrition_sugar', sa.Float(), nullable=True),
        sa.Column('nutrition_salt', sa.Float(), nullable=True),
        sa.Column('nutrition_total_grams', sa.Float(), nullable=True),
        sa.Column('nutrition_warning_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('nutrition_has_estimated_conversions', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('nutrition_computed_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_recipe')),
    )
    op.create_index('ix_recipe_name', 'recipe', ['name'])

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE', name=op.f('fk_recipe_ingredient_recipe_id_recipe')),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE', name=op.f('fk_recipe_ingredient_ingredient_id_ingredient')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_recipe_ingredient')),
    )
    op.create_index('ix_recipe_ingredient_recipe_id', 'recipe_ingredient', ['recipe_id'])
    op.create_index('ix_recipe_ingredient_ingredient_id', 'recipe_ingredient', ['ingredient_id'])

    op.create_table(
        'nutrition_plan',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_nutrition_plan')),
    )

    op.create_table(
        'nutrition_plan_meal_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column('meal_slot', sa.String(length=50), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['plan_id'], ['nutrition_plan.id'], ondelete='CASCADE', name=op.f('fk_nutrition_plan_meal_entry_plan_id_nutrition_plan')),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE', name=op.f('fk_nutrition_plan_meal_entry_ingredient_id_ingredient')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_nutrition_plan_meal_entry')),
    )
    op.create_index('ix_nutrition_plan_meal_entry_plan_id', 'nutrition_plan_meal_entry', ['plan_id'])
    op.create_index('ix_nutrition_plan_meal_entry_meal_slot', 'nutrition_plan_meal_entry', ['meal_slot'])
    op.create_index('ix_nutrition_plan_meal_entry_ingredient_id', 'nutrition_plan_meal_entry', ['ingredient_id'])

    op.create_table(
        'path',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_path')),
        sa.UniqueConstraint('name', name=op.f('uq_path_name')),
    )

    op.create_table(
        'variant_type',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_variant_type')),
        sa.UniqueConstraint('name', name=op.f('uq_variant_type_name')),
    )

    op.create_table(
        'variant_option',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('variant_type_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['variant_type_id'], ['variant_type.id'], ondelete='CASCADE', name=op.f('fk_variant_option_variant_type_id_variant_type')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_variant_option')),
    )
    op.create_index('ix_variant_option_variant_type_id', 'variant_option', ['variant_type_id'])

    op.create_table(
        'path_assignment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('path_id', sa.Integer(), nullable=False),
        sa.Column('kind', sa.String(length=20), nullable=False),
        sa.Column('content_ref_id', sa.Integer(), nullable=False),
        sa.Column('week_start', sa.Integer(), nullable=False),
        sa.Column('week_end', sa.Integer(), nullable=False),
        sa.Column('variant_option_id', sa.Integer(), nullable=True),
        sa.CheckConstraint('week_start >= 1', name='ck_path_assignment_week_start'),
        sa.CheckConstraint('week_end >= week_start', name='ck_path_assignment_week_window'),
        sa.ForeignKeyConstraint(['path_id'], ['path.id'], ondelete='CASCADE', name=op.f('fk_path_assignment_path_id_path')),
        sa.ForeignKeyConstraint(['variant_option_id'], ['variant_option.id'], ondelete='CASCADE', name=op.f('fk_path_assignment_variant_option_id_variant_option')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_path_assignment')),
    )
    op.create_index('ix_path_assignment_path_id', 'path_assignment', ['path_id'])
    op.create_index('ix_path_assignment_kind', 'path_assignment', ['kind'])
    op.create_index('ix_path_assignment_variant_option_id', 'path_assignment', ['variant_option_id'])

    op.create_table(
        'user_path_enrollment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('path_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['path_id'], ['path.id'], ondelete='CASCADE', name=op.f('fk_user_path_enrollment_path_id_path')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_path_enrollment')),
    )
    op.create_index('ix_user_path_enrollment_user_id', 'user_path_enrollment', ['user_id'])
    op.create_index('ix_user_path_enrollment_path_id', 'user_path_enrollment', ['path_id'])
    op.create_index('ix_user_path_enrollment_is_active', 'user_path_enrollment', ['is_active'])

    op.create_table(
        'user_enrollment_variant',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('variant_type_id', sa.Integer(), nullable=False),
        sa.Column('variant_option_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['enrollment_id'], ['user_path_enrollment.id'], ondelete='CASCADE', name=op.f('fk_user_enrollment_variant_enrollment_id_user_path_enrollment')),
        sa.ForeignKeyConstraint(['variant_type_id'], ['variant_type.id'], ondelete='CASCADE', name=op.f('fk_user_enrollment_variant_variant_type_id_variant_type')),
        sa.ForeignKeyConstraint(['variant_option_id'], ['variant_option.id'], ondelete='CASCADE', name=op.f('fk_user_enrollment_variant_variant_option_id_variant_option')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_enrollment_variant')),
        sa.UniqueConstraint('enrollment_id', 'variant_type_id', name='uq_enrollment_variant_type'),
    )
    op.create_index('ix_user_enrollment_variant_enrollment_id', 'user_enrollment_variant', ['enrollment_id'])

    op.create_table(
        'user_shopping_list',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['enrollment_id'], ['user_path_enrollment.id'], ondelete='CASCADE', name=op.f('fk_user_shopping_list_enrollment_id_user_path_enrollment')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_shopping_list')),
        sa.UniqueConstraint('enrollment_id', 'week', name='uq_shopping_list_enrollment_week'),
    )
    op.create_index('ix_user_shopping_list_user_id', 'user_shopping_list', ['user_id'])

    op.create_table(
        'user_shopping_list_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('shopping_list_id', sa.Integer(), nullable=False),
        sa.Column('dedupe_key', sa.String(length=200), nullable=False),
        sa.Column('label', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('amount', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('is_checked', sa.Boolean(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=True),
        sa.Column('source_recipe_id', sa.Integer(), nullable=True),
        sa.Column('created_by_user_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['shopping_list_id'], ['user_shopping_list.id'], ondelete='CASCADE', name=op.f('fk_user_shopping_list_item_shopping_list_id_user_shopping_list')),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='SET NULL', name=op.f('fk_user_shopping_list_item_ingredient_id_ingredient')),
        sa.ForeignKeyConstraint(['source_recipe_id'], ['recipe.id'], ondelete='SET NULL', name=op.f('fk_user_shopping_list_item_source_recipe_id_recipe')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_user_shopping_list_item')),
        sa.UniqueConstraint('shopping_list_id', 'dedupe_key', name='uq_shopping_item_dedupe_key'),
    )
    op.create_index('ix_user_shopping_list_item_shopping_list_id', 'user_shopping_list_item', ['shopping_list_id'])
    op.create_index('ix_user_shopping_list_item_ingredient_id', 'user_shopping_list_item', ['ingredient_id'])


def downgrade():
    op.drop_table('user_shopping_list_item')
    op.drop_table('user_shopping_list')
    op.drop_table('user_enrollment_variant')
    op.drop_table('user_path_enrollment')
    op.drop_table('path_assignment')
    op.drop_table('variant_option')
    op.drop_table('variant_type')
    op.drop_table('path')
    op.drop_table('nutrition_plan_meal_entry')
    op.drop_table('nutrition_plan')
    op.drop_table('recipe_ingredient')
    op.drop_table('recipe')
    op.drop_table('ingredient')
