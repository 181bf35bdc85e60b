"""Tests for the unit registry."""

from decimal import Decimal
from itertools import permutations

import pytest

from constants import CUSTOM, STANDARD_UNITS, WEIGHT
from services import UnitInfo, UnitNotFoundError, UnitRegistry


def test_lookup_known_unit(registry):
    lb = registry.lookup('lb')
    assert lb.dimension == WEIGHT
    assert lb.factor_to_base == Decimal('453.592')
    assert lb.display_name == 'Pounds (lb)'


def test_lookup_unknown_unit_raises(registry):
    with pytest.raises(UnitNotFoundError):
        registry.lookup('fathom')
    assert registry.get('fathom') is None


def test_same_dimension(registry):
    assert registry.same_dimension('oz', 'kg')
    assert registry.same_dimension('tsp', 'gal')
    assert not registry.same_dimension('oz', 'cup')
    assert not registry.same_dimension('oz', 'fathom')


def test_auto_convert_weight(registry):
    assert registry.auto_convert(16, 'oz', 'lb') == Decimal('1')
    assert registry.auto_convert(Decimal('3'), 'oz', 'lb') == Decimal('0.1875')
    assert registry.auto_convert(2, 'kg', 'g') == Decimal('2000')


def test_auto_convert_count(registry):
    assert registry.auto_convert(2, 'dozen', 'each') == Decimal('24')


def test_auto_convert_across_dimensions_is_none(registry):
    assert registry.auto_convert(1, 'cup', 'lb') is None
    assert registry.auto_convert(1, 'gal', 'each') is None


def test_auto_convert_custom_is_none(registry):
    assert registry.dimension_of('pc') == CUSTOM
    assert registry.auto_convert(1, 'pc', 'pieces') is None
    assert registry.auto_convert(1, 'pc', 'oz') is None


def test_custom_unit_does_not_convert_to_itself(registry):
    assert not registry.are_compatible('pc', 'pc')
    assert registry.auto_convert(5, 'pc', 'pc') is None
    assert registry.factor_between('pc', 'pc') is None


def test_auto_convert_unknown_is_none(registry):
    assert registry.auto_convert(1, 'oz', 'stone') is None
    assert registry.auto_convert(1, 'stone', 'stone') is None


def test_weight_round_trip(registry):
    weights = [code for code, _, dimension, _ in STANDARD_UNITS if dimension == WEIGHT]
    quantity = Decimal('7.25')
    for a, b in permutations(weights, 2):
        there = registry.auto_convert(quantity, a, b)
        back = registry.auto_convert(there, b, a)
        assert abs(back - quantity) < Decimal('1e-9'), (a, b)


def test_first_definition_of_code_wins():
    registry = UnitRegistry([
        UnitInfo('oz', WEIGHT, '28.3495'),
        UnitInfo('oz', WEIGHT, '1'),
        UnitInfo('g', WEIGHT, '1'),
    ])
    assert len(registry) == 2
    assert registry.auto_convert(1, 'oz', 'g') == Decimal('28.3495')


def test_weight_unit_without_factor_does_not_convert():
    registry = UnitRegistry([UnitInfo('g', WEIGHT, '1'), UnitInfo('stone', WEIGHT, None)])
    assert registry.same_dimension('g', 'stone')
    assert not registry.are_compatible('g', 'stone')
    assert registry.auto_convert(1, 'stone', 'g') is None
    assert registry.auto_convert(1, 'stone', 'stone') is None


def test_factor_between(registry):
    assert registry.factor_between('lb', 'oz') == Decimal('16')
    assert registry.factor_between('dozen', 'each') == Decimal('12')
    assert registry.factor_between('oz', 'oz') == Decimal('1')
    assert registry.factor_between('cup', 'lb') is None
