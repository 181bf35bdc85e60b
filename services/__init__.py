"""
Services Package

Unit conversion and recipe costing logic.
"""

from .errors import (
    CostingError,
    MalformedInputError,
    IngredientNotFoundError,
    RecipeNotFoundError,
    UnitNotFoundError,
    UnitInUseError,
    InvalidUnitError,
)

from .registry import UnitInfo, UnitRegistry
from .conversions import ConversionRecord, ConversionTable

from .context import (
    CostingContext,
    IngredientInfo,
    RecipeInfo,
    RecipeLine,
    load_context,
)

from .resolver import (
    ConversionFailure,
    ConversionResolver,
    ConversionResult,
    resolve_conversion,
)

from .cost import (
    calculate_ingredient_cost,
    calculate_recipe_cost,
    calculate_food_cost_percent,
    calculate_margin_percent,
)

from .units import (
    create_unit,
    update_unit,
    delete_unit,
    unit_usage,
    seed_standard_units,
    add_universal_conversion,
    add_ingredient_conversion,
)

__all__ = [
    # Errors
    'CostingError',
    'MalformedInputError',
    'IngredientNotFoundError',
    'RecipeNotFoundError',
    'UnitNotFoundError',
    'UnitInUseError',
    'InvalidUnitError',
    # Registry and tables
    'UnitInfo',
    'UnitRegistry',
    'ConversionRecord',
    'ConversionTable',
    # Context
    'CostingContext',
    'IngredientInfo',
    'RecipeInfo',
    'RecipeLine',
    'load_context',
    # Resolver
    'ConversionFailure',
    'ConversionResolver',
    'ConversionResult',
    'resolve_conversion',
    # Cost
    'calculate_ingredient_cost',
    'calculate_recipe_cost',
    'calculate_food_cost_percent',
    'calculate_margin_percent',
    # Unit admin
    'create_unit',
    'update_unit',
    'delete_unit',
    'unit_usage',
    'seed_standard_units',
    'add_universal_conversion',
    'add_ingredient_conversion',
]
