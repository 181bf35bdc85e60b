import sys
from decimal import Decimal
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app import create_app
from constants import STANDARD_UNITS
from models import db
from services import (
    ConversionRecord,
    ConversionTable,
    CostingContext,
    IngredientInfo,
    RecipeInfo,
    RecipeLine,
    UnitInfo,
    UnitRegistry,
)

SCALLOPS = 1
SHRIMP = 2
MILK = 3
SALMON = 4
TAMAGO = 5
NORI = 6

SCALLOP_NIGIRI = 10
STAFF_MEAL = 11
HAND_ROLL = 12


def build_registry():
    return UnitRegistry(
        UnitInfo(code, dimension, factor, display_name=name)
        for code, name, dimension, factor in STANDARD_UNITS
    )


@pytest.fixture(name="registry")
def registry_fixture():
    return build_registry()


@pytest.fixture(name="context")
def context_fixture(registry):
    ingredients = [
        IngredientInfo(SCALLOPS, 'lb', '19.20', piece_weight_oz='1.5', name='Scallops'),
        IngredientInfo(SHRIMP, 'oz', '0.80', piece_weight_oz='0.6', name='Shrimp'),
        IngredientInfo(MILK, 'gal', '4.00', name='Milk'),
        IngredientInfo(SALMON, 'lb', '12.00', piece_weight_oz='2', name='Salmon'),
        IngredientInfo(TAMAGO, 'oz', '0.50', name='Tamago'),
        IngredientInfo(NORI, 'pieces', '0.10', piece_weight_oz='0', name='Nori'),
    ]
    universal = ConversionTable([
        ConversionRecord('pieces', 'oz', Decimal('0.6')),
        ConversionRecord('cup', 'lb', Decimal('0.5')),
    ])
    overrides = ConversionTable([
        ConversionRecord('pieces', 'oz', Decimal('8'), ingredient_id=SALMON),
        ConversionRecord('pc', 'lb', Decimal('0.25'), ingredient_id=SALMON),
    ])
    recipes = [
        RecipeInfo(
            SCALLOP_NIGIRI,
            lines=[RecipeLine(SCALLOPS, '2', 'pc'), RecipeLine(SHRIMP, '4', 'oz')],
            selling_price='20.00',
            servings=2,
            name='Scallop Nigiri',
        ),
        RecipeInfo(
            STAFF_MEAL,
            lines=[RecipeLine(SHRIMP, '10', 'oz')],
            selling_price='0',
            name='Staff Meal',
        ),
        RecipeInfo(
            HAND_ROLL,
            lines=[RecipeLine(NORI, '1', 'pieces'), RecipeLine(MILK, '2', 'pc')],
            selling_price='5.00',
            name='Hand Roll',
        ),
    ]
    return CostingContext(
        units=registry,
        universal_conversions=universal,
        ingredient_conversions=overrides,
        ingredients=ingredients,
        recipes=recipes,
    )


@pytest.fixture(name="app")
def app_fixture():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
