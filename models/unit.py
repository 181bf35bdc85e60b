"""
Unit Model

Contains the Unit model: the restaurant's configurable catalog of
measurement units, each tagged with a dimension and a factor to the
dimension's base unit.
"""

from .base import db


class Unit(db.Model):
    """
    Measurement unit configured by a restaurant admin.

    Units in the same Weight/Volume/Count dimension convert by ratio through
    factor_to_base. Custom units have no factor and only convert through
    explicit conversion records.
    """
    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, nullable=False, default=1, index=True)
    code = db.Column(db.String(50), nullable=False)
    display_name = db.Column(db.String(100), nullable=False)
    dimension = db.Column(db.String(20), nullable=False, default='Custom')

    # 1 unit = factor_to_base base units (e.g. 1 lb = 453.592 g); NULL for Custom
    factor_to_base = db.Column(db.Numeric(15, 6), nullable=True)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint('restaurant_id', 'code', name='unique_unit_code_per_restaurant'),
    )

    def __repr__(self):
        return f'<Unit {self.code} ({self.dimension})>'
