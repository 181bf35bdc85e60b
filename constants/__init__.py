"""
Constants Package

Unit catalog and validation whitelists shared across the application.
"""

from .units import (
    WEIGHT,
    VOLUME,
    COUNT,
    CUSTOM,
    DIMENSIONS,
    AUTO_CONVERT_DIMENSIONS,
    STANDARD_UNITS,
    PIECE_UNITS,
    PIECE_WEIGHT_UNIT,
)

from .validation import (
    VALID_DIMENSIONS,
    MAX_LENGTHS,
    COST_DECIMAL_PLACES,
    MISSING_CONVERSION_WARNING,
)

__all__ = [
    # Units
    'WEIGHT',
    'VOLUME',
    'COUNT',
    'CUSTOM',
    'DIMENSIONS',
    'AUTO_CONVERT_DIMENSIONS',
    'STANDARD_UNITS',
    'PIECE_UNITS',
    'PIECE_WEIGHT_UNIT',
    # Validation
    'VALID_DIMENSIONS',
    'MAX_LENGTHS',
    'COST_DECIMAL_PLACES',
    'MISSING_CONVERSION_WARNING',
]
