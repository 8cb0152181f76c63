"""Reference daily intake values used for percentage calculations."""

from collections.abc import Mapping
from types import MappingProxyType

from nutrition_calculator.domain.nutrition import Nutrient

# kcal for energy, mg for sodium, grams otherwise
DAILY_VALUES: Mapping[str, float] = MappingProxyType(
    {
        Nutrient.ENERGY.field: 2230,
        Nutrient.PROTEIN.field: 55,
        Nutrient.CARBOHYDRATES.field: 330,
        Nutrient.ADDED_SUGARS.field: 30,
        Nutrient.DIETARY_FIBER.field: 30,
        Nutrient.TOTAL_FAT.field: 74,
        Nutrient.SATURATED_FAT.field: 22,
        Nutrient.SODIUM.field: 2000,
        Nutrient.MONOUNSATURATED_FAT.field: 25,
        Nutrient.POLYUNSATURATED_FAT.field: 25,
        Nutrient.TRANS_FAT.field: 2,
    }
)
