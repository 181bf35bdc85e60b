"""Tests for conversion resolution order and failure handling."""

import logging
from decimal import Decimal

import pytest

from services import (
    ConversionRecord,
    ConversionTable,
    CostingContext,
    IngredientInfo,
    MalformedInputError,
    resolve_conversion,
)
from services.resolver import IDENTITY, INGREDIENT, PIECE_WEIGHT, REGISTRY, UNIVERSAL

from conftest import MILK, NORI, SALMON, SCALLOPS, SHRIMP, TAMAGO, build_registry


@pytest.mark.parametrize("ingredient_id", [None, SCALLOPS, MILK, 999])
def test_identity(context, ingredient_id):
    result = resolve_conversion(context, '3.5', 'oz', 'oz', ingredient_id)
    assert result.ok
    assert result.value == Decimal('3.5')
    assert result.method == IDENTITY
    assert result.factor == 1


def test_identity_with_empty_context():
    result = resolve_conversion(CostingContext(), 4, 'bunch', 'bunch')
    assert result.value == Decimal('4')


def test_registry_conversion(context):
    result = resolve_conversion(context, 1, 'lb', 'oz')
    assert result.method == REGISTRY
    assert result.value == Decimal('16')
    assert result.factor == Decimal('16')


def test_weight_round_trip(context):
    there = resolve_conversion(context, '2.3', 'kg', 'oz').value
    back = resolve_conversion(context, there, 'oz', 'kg').value
    assert abs(back - Decimal('2.3')) < Decimal('1e-9')


def test_ingredient_specific_beats_universal(context):
    result = resolve_conversion(context, 1, 'pieces', 'oz', SALMON)
    assert result.method == INGREDIENT
    assert result.value == Decimal('8')
    assert result.factor == Decimal('8')


def test_universal_used_without_ingredient_override(context):
    result = resolve_conversion(context, 3, 'pieces', 'oz', TAMAGO)
    assert result.method == UNIVERSAL
    assert result.value == Decimal('1.8')
    assert result.factor == Decimal('0.6')


def test_universal_used_without_ingredient(context):
    result = resolve_conversion(context, 2, 'cup', 'lb')
    assert result.method == UNIVERSAL
    assert result.value == Decimal('1.0')


def test_ingredient_specific_beats_piece_weight(context):
    # Salmon has a 2 oz piece weight but an explicit pc -> lb record
    result = resolve_conversion(context, 2, 'pc', 'lb', SALMON)
    assert result.method == INGREDIENT
    assert result.value == Decimal('0.5')


def test_piece_weight_to_ounces(context):
    result = resolve_conversion(context, 2, 'pc', 'oz', SHRIMP)
    assert result.method == PIECE_WEIGHT
    assert result.value == Decimal('1.2')
    assert result.factor == Decimal('0.6')


def test_piece_weight_scallops_to_pounds(context):
    result = resolve_conversion(context, 2, 'pc', 'lb', SCALLOPS)
    assert result.method == PIECE_WEIGHT
    assert result.value == Decimal('0.1875')
    assert result.factor == Decimal('0.09375')


def test_piece_weight_reverse_direction(context):
    result = resolve_conversion(context, '0.1875', 'lb', 'piece', SCALLOPS)
    assert result.method == PIECE_WEIGHT
    assert result.value == Decimal('2')
    assert abs(result.factor - Decimal('16') / Decimal('1.5')) < Decimal('1e-9')


def test_piece_weight_needs_weight_target(context):
    result = resolve_conversion(context, 2, 'pc', 'cup', SCALLOPS)
    assert result.failed


def test_piece_weight_not_used_without_ingredient(context):
    result = resolve_conversion(context, 2, 'pc', 'oz')
    assert result.failed


def test_zero_piece_weight_is_ignored(context):
    result = resolve_conversion(context, 2, 'pc', 'oz', NORI)
    assert result.failed


def test_universal_pieces_not_replaced_by_piece_weight():
    # Step 3 only applies when the ingredient has a piece weight
    context = CostingContext(
        units=build_registry(),
        universal_conversions=ConversionTable([ConversionRecord('pieces', 'oz', '0.6')]),
        ingredients=[IngredientInfo(1, 'oz', '1.00')],
    )
    result = resolve_conversion(context, 3, 'pieces', 'oz', 1)
    assert result.method == UNIVERSAL
    assert result.value == Decimal('1.8')


def test_unknown_ingredient_falls_through(context):
    result = resolve_conversion(context, 16, 'oz', 'lb', 999)
    assert result.method == REGISTRY
    assert result.value == Decimal('1')


def test_failure_is_returned_not_raised(context):
    result = resolve_conversion(context, 1, 'gal', 'pc')
    assert result.failed
    assert not result.ok
    assert result.value is None
    assert result.factor is None
    assert result.from_unit == 'gal'
    assert result.to_unit == 'pc'
    assert result.ingredient_id is None


def test_failure_carries_ingredient(context):
    result = resolve_conversion(context, 1, 'pc', 'gal', MILK)
    assert result.failed
    assert result.ingredient_id == MILK


def test_reverse_of_record_is_not_inferred(context):
    result = resolve_conversion(context, 1, 'oz', 'pieces', TAMAGO)
    assert result.failed


def test_failure_logs_warning(context, caplog):
    with caplog.at_level(logging.WARNING, logger='services.resolver'):
        resolve_conversion(context, 1, 'gal', 'pc')
    assert 'No conversion path from gal to pc' in caplog.text


def test_no_rounding(context):
    result = resolve_conversion(context, 1, 'tsp', 'cup')
    assert result.value == Decimal('4.92892') / Decimal('236.588')


def test_units_are_stripped(context):
    result = resolve_conversion(context, 16, ' oz ', 'lb')
    assert result.value == Decimal('1')


@pytest.mark.parametrize("quantity, from_unit, to_unit", [
    (None, 'oz', 'lb'),
    ('abc', 'oz', 'lb'),
    (1, None, 'lb'),
    (1, 'oz', ''),
    (1, '   ', 'lb'),
])
def test_malformed_input_raises(context, quantity, from_unit, to_unit):
    with pytest.raises(MalformedInputError):
        resolve_conversion(context, quantity, from_unit, to_unit)


@pytest.mark.parametrize("quantity, from_unit, to_unit, ingredient_id", [
    (2, 'pc', 'lb', SCALLOPS),
    (1, 'pieces', 'oz', SALMON),
    (3, 'pieces', 'oz', TAMAGO),
    (5, 'lb', 'oz', None),
    ('2.3', 'kg', 'oz', None),
    (2, 'cup', 'lb', None),
])
def test_value_is_quantity_times_factor(context, quantity, from_unit, to_unit, ingredient_id):
    result = resolve_conversion(context, quantity, from_unit, to_unit, ingredient_id)
    assert result.ok
    assert abs(result.value - Decimal(str(quantity)) * result.factor) < Decimal('1e-9')


def test_piece_weight_skips_lookup_for_non_weight_target(context, monkeypatch):
    looked_up = []
    monkeypatch.setattr(context, 'find_ingredient', looked_up.append)
    result = resolve_conversion(context, 2, 'pc', 'cup', SCALLOPS)
    assert result.failed
    assert looked_up == []
