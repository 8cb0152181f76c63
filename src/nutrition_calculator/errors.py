"""Input validation errors raised while collecting label data."""


class NutritionInputError(ValueError):
    """Base class for rejected user input; the message is shown as-is."""


class MissingNutrientError(NutritionInputError):
    """Raised when a mandatory nutrient is absent or not a number."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid input: essential values like energy, protein, carbohydrates, "
            "total fat, saturated fat, and sodium are required."
        )


class InvalidUnitError(NutritionInputError):
    """Raised when the unit is neither grams nor milliliters."""

    def __init__(self) -> None:
        super().__init__('Invalid unit. Please enter "g" for solid or "ml" for liquid.')


class InvalidServingSizeError(NutritionInputError):
    """Raised when a serving size is not a positive number."""

    def __init__(self) -> None:
        super().__init__("Invalid serving size. Please enter a valid number.")
