"""
Unit Admin Service

Functions for creating, editing and deleting units and conversion
records. These write through the Flask-SQLAlchemy session and must run
inside an app context.
"""

import logging

from constants import CUSTOM, MAX_LENGTHS, STANDARD_UNITS, VALID_DIMENSIONS
from models import db, Unit, Ingredient, IngredientConversion, RecipeIngredient, UniversalConversion
from utils.numbers import to_decimal

from .errors import IngredientNotFoundError, InvalidUnitError, UnitInUseError, UnitNotFoundError

logger = logging.getLogger(__name__)


def _validate_code(code, field='code'):
    if not code or not str(code).strip():
        raise InvalidUnitError(f"Unit {field} is required")
    code = str(code).strip()
    if len(code) > MAX_LENGTHS['unit_code']:
        raise InvalidUnitError(f"Unit {field} too long: {code}")
    return code


def _validate_factor(factor, field='factor'):
    try:
        value = to_decimal(factor)
    except ValueError:
        raise InvalidUnitError(f"Invalid {field}: {factor!r}")
    if value is None or value <= 0:
        raise InvalidUnitError(f"{field} must be a positive number")
    return value


def _validate_unit_fields(dimension, factor_to_base):
    """Check dimension and factor together. Returns the cleaned factor."""
    if dimension not in VALID_DIMENSIONS:
        raise InvalidUnitError(f"Invalid dimension: {dimension}")
    if dimension == CUSTOM:
        if factor_to_base is not None:
            raise InvalidUnitError("Custom units cannot have a factor to base")
        return None
    return _validate_factor(factor_to_base, 'factor_to_base')


def get_unit(unit_id):
    unit = db.session.get(Unit, unit_id)
    if unit is None:
        raise UnitNotFoundError(unit_id)
    return unit


def create_unit(code, dimension, factor_to_base=None, display_name=None, restaurant_id=1,
                display_order=0):
    """
    Create a unit for a restaurant.

    Raises:
        InvalidUnitError: If the code is taken or the dimension/factor pair is invalid
    """
    code = _validate_code(code)
    factor = _validate_unit_fields(dimension, factor_to_base)
    display_name = (display_name or code).strip()
    if len(display_name) > MAX_LENGTHS['unit_display_name']:
        raise InvalidUnitError(f"Display name too long: {display_name}")

    if Unit.query.filter_by(restaurant_id=restaurant_id, code=code).first():
        raise InvalidUnitError(f"Unit '{code}' already exists")

    unit = Unit(
        restaurant_id=restaurant_id,
        code=code,
        display_name=display_name,
        dimension=dimension,
        factor_to_base=factor,
        display_order=display_order,
    )
    db.session.add(unit)
    db.session.commit()
    logger.info("Created unit %s (%s) for restaurant %s", code, dimension, restaurant_id)
    return unit


def update_unit(unit_id, display_name=None, dimension=None, factor_to_base=None, is_active=None):
    """
    Edit a unit's display name, dimension, factor or active flag.

    The code is not editable: ingredients and recipe lines reference units by code.
    """
    unit = get_unit(unit_id)
    new_dimension = dimension if dimension is not None else unit.dimension
    if new_dimension == CUSTOM:
        new_factor = None
    else:
        new_factor = factor_to_base if factor_to_base is not None else unit.factor_to_base
    unit.factor_to_base = _validate_unit_fields(new_dimension, new_factor)
    unit.dimension = new_dimension
    if display_name is not None:
        unit.display_name = display_name.strip() or unit.code
    if is_active is not None:
        unit.is_active = bool(is_active)
    db.session.commit()
    logger.info("Updated unit %s", unit.code)
    return unit


def unit_usage(code, restaurant_id=1):
    """Count ingredients and recipe lines that reference unit code."""
    ingredient_count = Ingredient.query.filter_by(restaurant_id=restaurant_id, storage_unit=code).count()
    line_count = (
        RecipeIngredient.query
        .join(Ingredient, RecipeIngredient.ingredient_id == Ingredient.id)
        .filter(Ingredient.restaurant_id == restaurant_id, RecipeIngredient.unit == code)
        .count()
    )
    return ingredient_count, line_count


def delete_unit(unit_id):
    """
    Delete a unit that nothing references.

    Raises:
        UnitInUseError: If an ingredient storage unit or a recipe line uses it
    """
    unit = get_unit(unit_id)
    ingredient_count, line_count = unit_usage(unit.code, unit.restaurant_id)
    if ingredient_count or line_count:
        raise UnitInUseError(unit.code, ingredient_count, line_count)
    db.session.delete(unit)
    db.session.commit()
    logger.info("Deleted unit %s", unit.code)


def seed_standard_units(restaurant_id=1):
    """Add the standard unit catalog. Existing codes are left untouched. Returns units added."""
    existing = {u.code for u in Unit.query.filter_by(restaurant_id=restaurant_id).all()}
    added = 0
    for order, (code, display_name, dimension, factor) in enumerate(STANDARD_UNITS):
        if code in existing:
            continue
        db.session.add(Unit(
            restaurant_id=restaurant_id,
            code=code,
            display_name=display_name,
            dimension=dimension,
            factor_to_base=factor,
            display_order=order,
        ))
        added += 1
    db.session.commit()
    logger.info("Seeded %d standard units for restaurant %s (%d skipped)",
                added, restaurant_id, len(STANDARD_UNITS) - added)
    return added


def add_universal_conversion(from_unit, to_unit, factor, restaurant_id=1, notes=None):
    """Record 1 from_unit = factor to_unit for every ingredient."""
    record = UniversalConversion(
        restaurant_id=restaurant_id,
        from_unit=_validate_code(from_unit, 'from_unit'),
        to_unit=_validate_code(to_unit, 'to_unit'),
        factor=_validate_factor(factor),
        notes=notes,
    )
    db.session.add(record)
    db.session.commit()
    logger.info("Added universal conversion %s -> %s = %s", record.from_unit, record.to_unit, record.factor)
    return record


def add_ingredient_conversion(ingredient_id, from_unit, to_unit, factor, notes=None):
    """Record 1 from_unit = factor to_unit for one ingredient only."""
    ingredient = db.session.get(Ingredient, ingredient_id)
    if ingredient is None:
        raise IngredientNotFoundError(ingredient_id)
    record = IngredientConversion(
        restaurant_id=ingredient.restaurant_id,
        ingredient_id=ingredient.id,
        from_unit=_validate_code(from_unit, 'from_unit'),
        to_unit=_validate_code(to_unit, 'to_unit'),
        factor=_validate_factor(factor),
        notes=notes,
    )
    db.session.add(record)
    db.session.commit()
    logger.info("Added conversion for %s: %s -> %s = %s",
                ingredient.name, record.from_unit, record.to_unit, record.factor)
    return record
