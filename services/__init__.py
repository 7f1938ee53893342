"""
Services Package

Business logic modules for nutrition quantification, recipe matching and
path content resolution.
"""

from .errors import (
    DomainError,
    NotFoundError,
    VariantsLockedError,
    UnsupportedUnitError,
    ValidationError,
)

from .conversion import (
    resolve_override,
    convert_to_grams_with_metadata,
    convert_to_grams,
    calculate_nutrition_by_100g,
    calculate_nutrition_with_conversion,
)

from .computation import (
    round_nutrition_value,
    compute_nutrition_totals,
    round_totals,
)

from .nutrition_cache import (
    recompute_recipe_cache,
    recompute_caches_by_ingredient,
    recompute_all_caches,
)

from .matching import get_nutrition_match_result

from .slot_matching import (
    build_slot_target,
    rank_candidates,
    build_slot_target_for_plan,
    suggest_recipes_for_slot,
)

from .variants import resolve_assignments, group_by_kind
from .weeks import resolve_week

from .enrollment import (
    can_update_variants,
    create_enrollment,
    update_enrollment_variants,
    get_active_enrollment,
)

from .content import get_path_max_week, resolve_current_content

from .catalog import (
    create_ingredient,
    update_ingredient,
    delete_ingredient,
    create_recipe,
    add_recipe_ingredient,
    update_recipe_ingredient,
    remove_recipe_ingredient,
)

from .shopping import (
    resolve_shopping_category,
    add_recipe_to_shopping_list,
    add_slot_to_shopping_list,
    add_manual_item,
    cleanup_shopping_list,
    toggle_item,
    delete_item,
)

from .suggestions import parse_nutrition_suggestion, apply_nutrition_suggestion

__all__ = [
    # Errors
    'DomainError',
    'NotFoundError',
    'VariantsLockedError',
    'UnsupportedUnitError',
    'ValidationError',
    # Conversion
    'resolve_override',
    'convert_to_grams_with_metadata',
    'convert_to_grams',
    'calculate_nutrition_by_100g',
    'calculate_nutrition_with_conversion',
    # Aggregation
    'round_nutrition_value',
    'compute_nutrition_totals',
    'round_totals',
    # Cache
    'recompute_recipe_cache',
    'recompute_caches_by_ingredient',
    'recompute_all_caches',
    # Matching
    'get_nutrition_match_result',
    'build_slot_target',
    'rank_candidates',
    'build_slot_target_for_plan',
    'suggest_recipes_for_slot',
    # Paths
    'resolve_assignments',
    'group_by_kind',
    'resolve_week',
    'can_update_variants',
    'create_enrollment',
    'update_enrollment_variants',
    'get_active_enrollment',
    'get_path_max_week',
    'resolve_current_content',
    # Catalog
    'create_ingredient',
    'update_ingredient',
    'delete_ingredient',
    'create_recipe',
    'add_recipe_ingredient',
    'update_recipe_ingredient',
    'remove_recipe_ingredient',
    # Shopping
    'resolve_shopping_category',
    'add_recipe_to_shopping_list',
    'add_slot_to_shopping_list',
    'add_manual_item',
    'cleanup_shopping_list',
    'toggle_item',
    'delete_item',
    # Suggestions
    'parse_nutrition_suggestion',
    'apply_nutrition_suggestion',
]
