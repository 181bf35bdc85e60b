"""
Costing Context

Read-only snapshot of everything the resolver and cost calculator read:
units, conversion tables, ingredients and recipes. Build one per request
with load_context(), or directly from plain records in tests.
"""

import logging

from utils.numbers import to_decimal

from .conversions import ConversionTable
from .errors import IngredientNotFoundError, RecipeNotFoundError
from .registry import UnitRegistry

logger = logging.getLogger(__name__)


class IngredientInfo:
    """Ingredient cost data: storage unit, cost per storage unit, piece weight."""

    __slots__ = ('id', 'name', 'storage_unit', 'cost_per_storage_unit', 'piece_weight_oz')

    def __init__(self, id, storage_unit, cost_per_storage_unit, piece_weight_oz=None, name=None):
        self.id = id
        self.name = name or f'ingredient {id}'
        self.storage_unit = storage_unit
        self.cost_per_storage_unit = to_decimal(cost_per_storage_unit if cost_per_storage_unit is not None else 0)
        self.piece_weight_oz = to_decimal(piece_weight_oz)

    @property
    def piece_weight(self):
        """Ounces per piece, or None when unset, zero or negative."""
        if self.piece_weight_oz is None or self.piece_weight_oz <= 0:
            return None
        return self.piece_weight_oz


class RecipeLine:
    __slots__ = ('ingredient_id', 'quantity', 'unit')

    def __init__(self, ingredient_id, quantity, unit):
        self.ingredient_id = ingredient_id
        self.quantity = quantity
        self.unit = unit


class RecipeInfo:
    __slots__ = ('id', 'name', 'selling_price', 'servings', 'lines')

    def __init__(self, id, lines=(), selling_price=None, servings=1, name=None):
        self.id = id
        self.name = name or f'recipe {id}'
        self.selling_price = to_decimal(selling_price)
        self.servings = servings
        self.lines = list(lines)


class CostingContext:
    """
    Injected data for one costing computation.

    Args:
        units: UnitRegistry
        universal_conversions: ConversionTable of restaurant-wide records
        ingredient_conversions: ConversionTable of ingredient-scoped records
        ingredients: iterable of IngredientInfo
        recipes: iterable of RecipeInfo
    """

    def __init__(self, units=None, universal_conversions=None, ingredient_conversions=None,
                 ingredients=(), recipes=()):
        self.units = units if units is not None else UnitRegistry()
        self.universal_conversions = (
            universal_conversions if universal_conversions is not None else ConversionTable()
        )
        self.ingredient_conversions = (
            ingredient_conversions if ingredient_conversions is not None else ConversionTable()
        )
        self._ingredients = {i.id: i for i in ingredients}
        self._recipes = {r.id: r for r in recipes}

    def find_ingredient(self, ingredient_id):
        return self._ingredients.get(ingredient_id)

    def get_ingredient(self, ingredient_id):
        ingredient = self._ingredients.get(ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    def get_recipe(self, recipe_id):
        recipe = self._recipes.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe


def load_context(restaurant_id=1):
    """
    Load a CostingContext for one restaurant from the database.

    Conversion rows are ordered by id so duplicate records resolve to the
    oldest one. Inactive units are left out of the registry.
    Must run inside a Flask app context.
    """
    from models import (
        Unit, Ingredient, IngredientConversion, UniversalConversion, Recipe,
    )

    units = Unit.query.filter_by(restaurant_id=restaurant_id, is_active=True).order_by(Unit.id).all()
    universal = UniversalConversion.query.filter_by(
        restaurant_id=restaurant_id).order_by(UniversalConversion.id).all()
    overrides = IngredientConversion.query.filter_by(
        restaurant_id=restaurant_id).order_by(IngredientConversion.id).all()
    ingredients = Ingredient.query.filter_by(restaurant_id=restaurant_id).all()
    recipes = Recipe.query.filter_by(restaurant_id=restaurant_id).all()

    logger.debug(
        "Loaded costing context for restaurant %s: %d units, %d universal, %d ingredient conversions",
        restaurant_id, len(units), len(universal), len(overrides),
    )

    return CostingContext(
        units=UnitRegistry.from_records(units),
        universal_conversions=ConversionTable.from_records(universal),
        ingredient_conversions=ConversionTable.from_records(overrides),
        ingredients=[
            IngredientInfo(
                i.id, i.storage_unit, i.cost_per_storage_unit,
                piece_weight_oz=i.piece_weight_oz, name=i.name,
            )
            for i in ingredients
        ],
        recipes=[
            RecipeInfo(
                r.id,
                lines=[RecipeLine(ri.ingredient_id, ri.quantity, ri.unit) for ri in r.ingredients],
                selling_price=r.selling_price,
                servings=r.servings,
                name=r.name,
            )
            for r in recipes
        ],
    )
