"""
Validation Constants

Contains whitelist values and limits for validating admin input to the
unit and conversion tables.
"""

from decimal import Decimal

from .units import DIMENSIONS

# Valid values for the unit dimension field (whitelist)
VALID_DIMENSIONS = set(DIMENSIONS)

# Maximum field lengths, matching the column sizes
MAX_LENGTHS = {
    'unit_code': 50,
    'unit_display_name': 100,
}

# Costs are displayed to the cent
COST_DECIMAL_PLACES = Decimal('0.01')

# Warning attached to a cost computed without a verified conversion
MISSING_CONVERSION_WARNING = 'Missing conversion: {from_unit} -> {to_unit}'
