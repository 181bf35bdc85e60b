# Utility modules for the costing app
from .numbers import to_decimal, format_money
from .logging import configure_logging
