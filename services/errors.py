"""
Costing Errors

Exceptions raised for broken caller contracts and data constraint
violations. A missing conversion path is not an error: the resolver
returns a ConversionFailure for that.
"""


class CostingError(Exception):
    """Base class for unit conversion and costing errors."""
    pass


class MalformedInputError(CostingError, ValueError):
    """Raised when a required quantity or unit is missing or unusable."""
    pass


class IngredientNotFoundError(CostingError, LookupError):
    """Raised when an ingredient id does not exist."""

    def __init__(self, ingredient_id):
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient not found: {ingredient_id}")


class RecipeNotFoundError(CostingError, LookupError):
    """Raised when a recipe id does not exist."""

    def __init__(self, recipe_id):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe not found: {recipe_id}")


class UnitNotFoundError(CostingError, LookupError):
    """Raised when a unit code is not in the registry."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unit not found: {code}")


class UnitInUseError(CostingError):
    """Raised when deleting a unit still referenced by an ingredient or recipe line."""

    def __init__(self, code, ingredient_count=0, line_count=0):
        self.code = code
        self.ingredient_count = ingredient_count
        self.line_count = line_count
        super().__init__(
            f"Unit '{code}' is in use by {ingredient_count} ingredient(s) "
            f"and {line_count} recipe line(s)"
        )


class InvalidUnitError(CostingError, ValueError):
    """Raised when unit admin data fails validation."""
    pass
