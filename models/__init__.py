"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .unit import Unit
from .ingredient import Ingredient, IngredientConversion
from .conversion import UniversalConversion
from .recipe import Recipe, RecipeIngredient

__all__ = [
    'db',
    'Unit',
    'Ingredient',
    'IngredientConversion',
    'UniversalConversion',
    'Recipe',
    'RecipeIngredient',
]
