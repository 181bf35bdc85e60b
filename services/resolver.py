"""
Conversion Resolver

Converts a quantity between two unit codes, most specific knowledge first:

1. Identity: same unit, quantity unchanged
2. Ingredient-specific conversion record
3. Piece weight: pc/piece/pieces <-> weight units via the ingredient's oz per piece
4. Unit registry auto-convert within one standard dimension
5. Universal (restaurant-wide) conversion record
6. ConversionFailure

A missing path is an expected outcome and comes back as a
ConversionFailure value. Only malformed input raises.
"""

import logging
from decimal import Decimal

from constants import PIECE_UNITS, PIECE_WEIGHT_UNIT
from utils.numbers import to_decimal

from .errors import MalformedInputError

logger = logging.getLogger(__name__)

# Resolution methods, in priority order
IDENTITY = 'identity'
INGREDIENT = 'ingredient'
PIECE_WEIGHT = 'piece_weight'
REGISTRY = 'registry'
UNIVERSAL = 'universal'

ONE = Decimal('1')


class ConversionResult:
    """
    Successful conversion: value in the target unit, the step that produced
    it, and the effective factor (target units per one source unit).
    """

    ok = True
    failed = False

    __slots__ = ('value', 'method', 'from_unit', 'to_unit', 'factor')

    def __init__(self, value, method, from_unit, to_unit, factor=None):
        self.value = value
        self.method = method
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.factor = factor

    def __repr__(self):
        return f'ConversionResult({self.value!r}, method={self.method!r}, factor={self.factor!r})'


class ConversionFailure:
    """No conversion path between from_unit and to_unit (for ingredient_id, if given)."""

    ok = False
    failed = True
    value = None
    method = None
    factor = None

    __slots__ = ('from_unit', 'to_unit', 'ingredient_id')

    def __init__(self, from_unit, to_unit, ingredient_id=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.ingredient_id = ingredient_id

    def __repr__(self):
        return f'ConversionFailure({self.from_unit!r} -> {self.to_unit!r}, ingredient_id={self.ingredient_id!r})'


def _clean_unit(unit, field):
    if unit is None or not isinstance(unit, str) or not unit.strip():
        raise MalformedInputError(f"{field} is required")
    return unit.strip()


def _clean_quantity(quantity):
    if quantity is None:
        raise MalformedInputError("quantity is required")
    try:
        return to_decimal(quantity)
    except ValueError as e:
        raise MalformedInputError(f"Invalid quantity: {quantity!r}") from e


def is_piece_unit(code):
    return code.lower() in PIECE_UNITS


class ConversionResolver:
    """Resolves unit conversions against one CostingContext."""

    def __init__(self, context):
        self.context = context

    def resolve(self, quantity, from_unit, to_unit, ingredient_id=None):
        """
        Convert quantity from from_unit to to_unit.

        Args:
            quantity: Amount to convert (number, numeric string or Decimal)
            from_unit: Unit code the quantity is in
            to_unit: Unit code to convert into
            ingredient_id: Optional ingredient for ingredient-specific rules

        Returns:
            ConversionResult on success, ConversionFailure when no path exists

        Raises:
            MalformedInputError: If quantity or a unit is missing
        """
        quantity = _clean_quantity(quantity)
        from_unit = _clean_unit(from_unit, 'from_unit')
        to_unit = _clean_unit(to_unit, 'to_unit')

        if from_unit == to_unit:
            return ConversionResult(quantity, IDENTITY, from_unit, to_unit, ONE)

        ctx = self.context

        if ingredient_id is not None:
            factor = ctx.ingredient_conversions.find_factor(from_unit, to_unit, ingredient_id)
            if factor is not None:
                return self._success(quantity * factor, factor, INGREDIENT, from_unit, to_unit, ingredient_id)

            bridged = self._via_piece_weight(quantity, from_unit, to_unit, ingredient_id)
            if bridged is not None:
                value, factor = bridged
                return self._success(value, factor, PIECE_WEIGHT, from_unit, to_unit, ingredient_id)

        value = ctx.units.auto_convert(quantity, from_unit, to_unit)
        if value is not None:
            factor = ctx.units.factor_between(from_unit, to_unit)
            return self._success(value, factor, REGISTRY, from_unit, to_unit, ingredient_id)

        factor = ctx.universal_conversions.find_factor(from_unit, to_unit)
        if factor is not None:
            return self._success(quantity * factor, factor, UNIVERSAL, from_unit, to_unit, ingredient_id)

        logger.warning(
            "No conversion path from %s to %s (ingredient %s)",
            from_unit, to_unit, ingredient_id,
        )
        return ConversionFailure(from_unit, to_unit, ingredient_id)

    def _via_piece_weight(self, quantity, from_unit, to_unit, ingredient_id):
        """
        Bridge pieces and weight units through ounces.

        Returns (value, factor) where factor is target units per source unit,
        or None when the step does not apply.
        """
        from_piece = is_piece_unit(from_unit)
        to_piece = is_piece_unit(to_unit)
        if from_piece == to_piece:
            return None

        units = self.context.units
        weight_unit = to_unit if from_piece else from_unit
        if not units.is_weight(weight_unit):
            return None

        ingredient = self.context.find_ingredient(ingredient_id)
        if ingredient is None or ingredient.piece_weight is None:
            return None
        piece_weight = ingredient.piece_weight

        if from_piece:
            value = units.auto_convert(quantity * piece_weight, PIECE_WEIGHT_UNIT, to_unit)
            factor = units.auto_convert(piece_weight, PIECE_WEIGHT_UNIT, to_unit)
        else:
            ounces = units.auto_convert(quantity, from_unit, PIECE_WEIGHT_UNIT)
            value = ounces / piece_weight if ounces is not None else None
            per_unit = units.factor_between(from_unit, PIECE_WEIGHT_UNIT)
            factor = per_unit / piece_weight if per_unit is not None else None
        if value is None:
            return None
        return value, factor

    def _success(self, value, factor, method, from_unit, to_unit, ingredient_id):
        logger.debug(
            "Converted %s -> %s via %s (ingredient %s): %s",
            from_unit, to_unit, method, ingredient_id, value,
        )
        return ConversionResult(value, method, from_unit, to_unit, factor)


def resolve_conversion(context, quantity, from_unit, to_unit, ingredient_id=None):
    """Resolve one conversion against context. See ConversionResolver.resolve."""
    return ConversionResolver(context).resolve(quantity, from_unit, to_unit, ingredient_id)
