"""
Unit Constants and Seed Tables

Contains the unit dimensions, the standard unit catalog seeded for every
restaurant, and the unit codes that get special handling during conversion.
"""

from decimal import Decimal

# Unit dimensions (families of mutually convertible units)
WEIGHT = 'Weight'
VOLUME = 'Volume'
COUNT = 'Count'
CUSTOM = 'Custom'

DIMENSIONS = (WEIGHT, VOLUME, COUNT, CUSTOM)

# Dimensions whose units convert by ratio through factor_to_base
AUTO_CONVERT_DIMENSIONS = {WEIGHT, VOLUME, COUNT}


# Standard units seeded per restaurant: (code, display name, dimension, factor to base)
STANDARD_UNITS = [
    # Weight: base = g
    ('g', 'Grams (g)', WEIGHT, Decimal('1')),
    ('kg', 'Kilograms (kg)', WEIGHT, Decimal('1000')),
    ('oz', 'Ounces (oz)', WEIGHT, Decimal('28.3495')),
    ('lb', 'Pounds (lb)', WEIGHT, Decimal('453.592')),
    # Volume: base = ml
    ('ml', 'Milliliters (ml)', VOLUME, Decimal('1')),
    ('l', 'Liters (l)', VOLUME, Decimal('1000')),
    ('tsp', 'Teaspoons (tsp)', VOLUME, Decimal('4.92892')),
    ('tbsp', 'Tablespoons (tbsp)', VOLUME, Decimal('14.7868')),
    ('cup', 'Cups (cup)', VOLUME, Decimal('236.588')),
    ('gal', 'Gallons (gal)', VOLUME, Decimal('3785.41')),
    # Count: base = each
    ('each', 'Each', COUNT, Decimal('1')),
    ('dozen', 'Dozen (dz)', COUNT, Decimal('12')),
    # Custom: no factor, explicit conversion records only
    ('pc', 'Piece (pc)', CUSTOM, None),
    ('pieces', 'Pieces', CUSTOM, None),
]

# Count-like units bridged to weight through an ingredient's piece weight
PIECE_UNITS = {'pc', 'piece', 'pieces'}

# Piece weights are stored in ounces
PIECE_WEIGHT_UNIT = 'oz'
