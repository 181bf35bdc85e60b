"""
Cost Calculation Service

Functions for calculating ingredient line and recipe costs. Every line
gets a number: when no conversion path exists the cost falls back to
quantity * cost_per_storage_unit and carries a conversion warning.
"""

import logging
from decimal import Decimal

from constants import MISSING_CONVERSION_WARNING
from utils.numbers import format_money, to_decimal

from .resolver import IDENTITY, ConversionResolver

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
HUNDRED = Decimal('100')


def _cost_line(resolver, ingredient, quantity, unit):
    """
    Cost one (quantity, unit) of ingredient. Returns a dict of line figures.

    conversion_applied only says the line unit differs from the storage unit.
    It stays True on an estimated line, so check conversion_warning to tell
    a verified conversion from a naive estimate. conversion_factor is None
    for same-unit lines and estimates.
    """
    result = resolver.resolve(quantity, unit, ingredient.storage_unit, ingredient.id)
    quantity = to_decimal(quantity)

    if result.ok:
        converted = result.value
        warning = None
    else:
        # Estimate as if the units were equal
        converted = quantity
        warning = MISSING_CONVERSION_WARNING.format(
            from_unit=result.from_unit, to_unit=result.to_unit
        )
        logger.warning(
            "Estimated cost for %s: %s %s treated as %s",
            ingredient.name, quantity, result.from_unit, ingredient.storage_unit,
        )

    cost = converted * ingredient.cost_per_storage_unit
    return {
        'ingredient_id': ingredient.id,
        'quantity': quantity,
        'unit': result.from_unit,
        'storage_unit': ingredient.storage_unit,
        'converted_quantity': converted,
        'method': result.method,
        'conversion_factor': result.factor if result.ok and result.method != IDENTITY else None,
        'line_cost': cost,
        'conversion_applied': result.from_unit != ingredient.storage_unit,
        'conversion_warning': warning is not None,
        'warning': warning,
    }


def calculate_ingredient_cost(context, ingredient_id, quantity, unit):
    """
    Calculate the cost of quantity unit of one ingredient.

    Args:
        context: CostingContext with the ingredient and conversion data
        ingredient_id: Ingredient to cost
        quantity: Amount used
        unit: Unit the amount is in

    Returns:
        dict with cost (string, to the cent), cost_value (Decimal),
        converted_quantity, storage_unit, conversion_factor,
        conversion_applied, conversion_warning and warning

    Raises:
        IngredientNotFoundError: If the ingredient does not exist
        MalformedInputError: If quantity or unit is missing
    """
    ingredient = context.get_ingredient(ingredient_id)
    line = _cost_line(ConversionResolver(context), ingredient, quantity, unit)

    logger.debug(
        "Cost of %s %s %s = %s %s x %s = %s",
        line['quantity'], unit, ingredient.name, line['converted_quantity'],
        ingredient.storage_unit, ingredient.cost_per_storage_unit, line['line_cost'],
    )

    return {
        'cost': format_money(line['line_cost']),
        'cost_value': line['line_cost'],
        'converted_quantity': line['converted_quantity'],
        'storage_unit': ingredient.storage_unit,
        'conversion_factor': line['conversion_factor'],
        'conversion_applied': line['conversion_applied'],
        'conversion_warning': line['conversion_warning'],
        'warning': line['warning'],
    }


def calculate_food_cost_percent(total_cost, selling_price):
    """Food cost as a percentage of selling price; 0 when there is no positive price."""
    if selling_price is None or selling_price <= 0:
        return ZERO
    return total_cost / selling_price * HUNDRED


def calculate_margin_percent(total_cost, selling_price):
    """Profit margin as a percentage of selling price; 0 when there is no positive price."""
    if selling_price is None or selling_price <= 0:
        return ZERO
    return (selling_price - total_cost) / selling_price * HUNDRED


def calculate_recipe_cost(context, recipe_id):
    """
    Calculate cost metrics for a recipe from its ingredient lines.

    Lines with no conversion path are estimated and flagged rather than
    failing the whole recipe.

    Returns:
        dict with recipe_id, total_cost, food_cost_percent, margin_percent,
        cost_per_serving, has_warnings and lines

    Raises:
        RecipeNotFoundError: If the recipe does not exist
        IngredientNotFoundError: If a line references a missing ingredient
    """
    recipe = context.get_recipe(recipe_id)
    resolver = ConversionResolver(context)

    lines = []
    for line in recipe.lines:
        ingredient = context.get_ingredient(line.ingredient_id)
        lines.append(_cost_line(resolver, ingredient, line.quantity, line.unit))

    total_cost = sum((line['line_cost'] for line in lines), ZERO)
    servings = recipe.servings if recipe.servings and recipe.servings > 0 else 1

    result = {
        'recipe_id': recipe.id,
        'total_cost': total_cost,
        'food_cost_percent': calculate_food_cost_percent(total_cost, recipe.selling_price),
        'margin_percent': calculate_margin_percent(total_cost, recipe.selling_price),
        'cost_per_serving': total_cost / servings,
        'has_warnings': any(line['conversion_warning'] for line in lines),
        'lines': lines,
    }

    logger.debug(
        "Recipe %s: total %s, food cost %s%%, margin %s%%",
        recipe.name, total_cost, result['food_cost_percent'], result['margin_percent'],
    )
    return result
