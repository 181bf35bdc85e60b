"""
Universal Conversion Model

Contains the UniversalConversion model for restaurant-wide unit pair
factors that apply to every ingredient.
"""

from .base import db


class UniversalConversion(db.Model):
    """Restaurant-wide factor: 1 from_unit = factor to_unit, for any ingredient."""
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, default=1, index=True)
    from_unit = db.Column(db.String(50), nullable=False)
    to_unit = db.Column(db.String(50), nullable=False)
    factor = db.Column(db.Numeric(15, 6), nullable=False)
    notes = db.Column(db.Text, nullable=True)
