"""
Conversion Tables

Exact-match lookup of explicit unit pair factors. The same class serves
the restaurant-wide universal table and the ingredient-specific table.
"""

from utils.numbers import to_decimal


class ConversionRecord:
    """1 from_unit = factor to_unit, optionally scoped to one ingredient."""

    __slots__ = ('from_unit', 'to_unit', 'factor', 'ingredient_id')

    def __init__(self, from_unit, to_unit, factor, ingredient_id=None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.factor = to_decimal(factor)
        self.ingredient_id = ingredient_id

    def __repr__(self):
        scope = f', ingredient_id={self.ingredient_id!r}' if self.ingredient_id is not None else ''
        return f'ConversionRecord({self.from_unit!r} -> {self.to_unit!r}, {self.factor!r}{scope})'


class ConversionTable:
    """
    Ordered collection of conversion records.

    Lookups are direction-sensitive: a record for A -> B is never used for
    B -> A. When duplicate records match, the first one in insertion order
    wins, so callers load records ordered by id.
    """

    def __init__(self, records=()):
        self._index = {}
        self._by_ingredient = {}
        for record in records:
            key = (record.ingredient_id, record.from_unit, record.to_unit)
            self._index.setdefault(key, record)
            self._by_ingredient.setdefault(record.ingredient_id, []).append(record)

    @classmethod
    def from_records(cls, rows):
        """Build from objects exposing from_unit/to_unit/factor and optionally ingredient_id."""
        return cls(
            ConversionRecord(r.from_unit, r.to_unit, r.factor, getattr(r, 'ingredient_id', None))
            for r in rows
        )

    def __len__(self):
        return sum(len(records) for records in self._by_ingredient.values())

    def find(self, from_unit, to_unit, ingredient_id=None):
        """Return the first matching ConversionRecord or None."""
        return self._index.get((ingredient_id, from_unit, to_unit))

    def find_factor(self, from_unit, to_unit, ingredient_id=None):
        """Return the first matching factor or None."""
        record = self.find(from_unit, to_unit, ingredient_id)
        return record.factor if record else None

    def for_ingredient(self, ingredient_id):
        """All records scoped to ingredient_id, in insertion order."""
        return list(self._by_ingredient.get(ingredient_id, []))
