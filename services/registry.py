"""
Unit Registry

Answers "what dimension is this unit in" and "what is its factor to the
dimension's base unit". Built once from unit records; lookups are pure.
"""

from constants import AUTO_CONVERT_DIMENSIONS, CUSTOM, WEIGHT
from utils.numbers import to_decimal

from .errors import UnitNotFoundError


class UnitInfo:
    """Read-only unit record: code, display name, dimension and factor to base."""

    __slots__ = ('code', 'display_name', 'dimension', 'factor_to_base')

    def __init__(self, code, dimension, factor_to_base=None, display_name=None):
        self.code = code
        self.display_name = display_name or code
        self.dimension = dimension
        self.factor_to_base = to_decimal(factor_to_base)

    @property
    def auto_convertible(self):
        return (
            self.dimension in AUTO_CONVERT_DIMENSIONS
            and self.factor_to_base is not None
            and self.factor_to_base > 0
        )

    def __repr__(self):
        return f'UnitInfo({self.code!r}, {self.dimension!r}, {self.factor_to_base!r})'


class UnitRegistry:
    """
    Catalog of known units keyed by code.

    Two units auto-convert when both exist, share a non-Custom dimension and
    have a positive factor_to_base. Anything else is "no path", reported as
    None rather than an exception.
    """

    def __init__(self, units=()):
        self._units = {}
        for unit in units:
            # First definition of a code wins
            self._units.setdefault(unit.code, unit)

    @classmethod
    def from_records(cls, records):
        """Build from objects exposing code/dimension/factor_to_base (e.g. Unit rows)."""
        return cls(
            UnitInfo(
                r.code,
                r.dimension,
                r.factor_to_base,
                display_name=getattr(r, 'display_name', None),
            )
            for r in records
        )

    def __contains__(self, code):
        return code in self._units

    def __iter__(self):
        return iter(self._units.values())

    def __len__(self):
        return len(self._units)

    def get(self, code):
        return self._units.get(code)

    def lookup(self, code):
        """Return the UnitInfo for code, or raise UnitNotFoundError."""
        unit = self._units.get(code)
        if unit is None:
            raise UnitNotFoundError(code)
        return unit

    def dimension_of(self, code):
        unit = self._units.get(code)
        return unit.dimension if unit else None

    def is_weight(self, code):
        return self.dimension_of(code) == WEIGHT

    def same_dimension(self, a, b):
        unit_a = self._units.get(a)
        unit_b = self._units.get(b)
        if unit_a is None or unit_b is None:
            return False
        return unit_a.dimension == unit_b.dimension

    def are_compatible(self, a, b):
        """True when auto_convert can bridge a and b."""
        unit_a = self._units.get(a)
        unit_b = self._units.get(b)
        if unit_a is None or unit_b is None:
            return False
        return (
            unit_a.dimension == unit_b.dimension
            and unit_a.dimension != CUSTOM
            and unit_a.auto_convertible
            and unit_b.auto_convertible
        )

    def auto_convert(self, quantity, from_unit, to_unit):
        """
        Convert quantity between two units of the same standard dimension.

        Returns quantity * factor(from_unit) / factor(to_unit), or None when
        either unit is unknown, the dimensions differ, or the dimension is Custom.
        """
        if not self.are_compatible(from_unit, to_unit):
            return None
        if from_unit == to_unit:
            return to_decimal(quantity)
        from_factor = self._units[from_unit].factor_to_base
        to_factor = self._units[to_unit].factor_to_base
        return to_decimal(quantity) * from_factor / to_factor

    def factor_between(self, from_unit, to_unit):
        """Target units per one from_unit, or None when auto_convert has no path."""
        if not self.are_compatible(from_unit, to_unit):
            return None
        return self._units[from_unit].factor_to_base / self._units[to_unit].factor_to_base
