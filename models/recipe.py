"""
Recipe Models

Contains the Recipe and RecipeIngredient models for managing
recipes and their ingredient lines.
"""

from .base import db


class Recipe(db.Model):
    """Recipe with selling price. Cost metrics are derived on read, never stored."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, default=1, index=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    category = db.Column(db.String(100), nullable=True)
    servings = db.Column(db.Integer, default=1)
    selling_price = db.Column(db.Numeric(10, 2), nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeIngredient.id'
    )


class RecipeIngredient(db.Model):
    """Recipe line: this recipe uses quantity unit of the ingredient."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id'), nullable=False, index=True)
    ingredient_id = db.Column(db.Integer, db.ForeignKey('ingredient.id', ondelete='CASCADE'), nullable=False, index=True)
    quantity = db.Column(db.Numeric(10, 4), nullable=False)
    unit = db.Column(db.String(50), nullable=False)
    notes = db.Column(db.Text, nullable=True)
    ingredient = db.relationship('Ingredient')
