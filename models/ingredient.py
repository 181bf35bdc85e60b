"""
Ingredient Models

Contains the Ingredient and IngredientConversion models for managing
ingredient cost data and per-ingredient unit overrides.
"""

from .base import db


class Ingredient(db.Model):
    """
    Ingredient priced per storage unit.

    cost_per_storage_unit is always denominated in storage_unit. piece_weight_oz
    bridges piece-like recipe units (pc, piece, pieces) to weight units when no
    explicit conversion record exists.
    """
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, default=1, index=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    category = db.Column(db.String(100), nullable=True)

    # Unit code the cost is denominated in (what you pay per)
    storage_unit = db.Column(db.String(50), nullable=False)

    # Cost per ONE storage_unit
    cost_per_storage_unit = db.Column(db.Numeric(10, 4), nullable=False, default=0)

    # Average weight of one piece in ounces
    piece_weight_oz = db.Column(db.Numeric(10, 4), nullable=True)

    conversions = db.relationship(
        'IngredientConversion', backref='ingredient', lazy=True,
        cascade='all, delete-orphan', order_by='IngredientConversion.id'
    )


class IngredientConversion(db.Model):
    """
    Ingredient-specific override: 1 from_unit = factor to_unit for this ingredient.

    Directional. A record for A -> B says nothing about B -> A.
    """
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, default=1, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    from_unit = db.Column(db.String(50), nullable=False)
    to_unit = db.Column(db.String(50), nullable=False)
    factor = db.Column(db.Numeric(15, 6), nullable=False)
    notes = db.Column(db.Text, nullable=True)
