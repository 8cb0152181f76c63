"""Nutrition domain models."""

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NutrientInfo:
    """Declarative nutrient definition."""

    field: str
    label: str
    unit: str
    mandatory: bool


class Nutrient(Enum):
    """Tracked nutrients in label order (single source of truth)."""

    ENERGY = NutrientInfo("energy", "Energy", "kcal", True)
    PROTEIN = NutrientInfo("protein", "Protein", "g", True)
    CARBOHYDRATES = NutrientInfo("carbohydrates", "Carbohydrates", "g", True)
    ADDED_SUGARS = NutrientInfo("added_sugars", "Added Sugars", "g", False)
    DIETARY_FIBER = NutrientInfo("dietary_fiber", "Dietary Fiber", "g", False)
    TOTAL_FAT = NutrientInfo("total_fat", "Total Fat", "g", True)
    SATURATED_FAT = NutrientInfo("saturated_fat", "Saturated Fat", "g", True)
    MONOUNSATURATED_FAT = NutrientInfo(
        "monounsaturated_fat", "Monounsaturated Fat", "g", False
    )
    POLYUNSATURATED_FAT = NutrientInfo(
        "polyunsaturated_fat", "Polyunsaturated Fat", "g", False
    )
    TRANS_FAT = NutrientInfo("trans_fat", "Trans Fat", "g", False)
    SODIUM = NutrientInfo("sodium", "Sodium", "mg", True)

    @property
    def field(self) -> str:
        return self.value.field

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def unit(self) -> str:
        return self.value.unit

    @property
    def mandatory(self) -> bool:
        return self.value.mandatory


class ServingUnit(Enum):
    """Unit the labeled and consumed serving sizes are expressed in."""

    MASS = "g"
    VOLUME = "ml"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts declared for one labeled serving.

    Optional nutrients default to 0. A value entered but not parseable is
    kept as NaN so downstream formatting can flag it.
    """

    energy: float
    protein: float
    carbohydrates: float
    total_fat: float
    saturated_fat: float
    sodium: float
    serving_size: float
    unit: ServingUnit
    added_sugars: float = 0.0
    dietary_fiber: float = 0.0
    monounsaturated_fat: float = 0.0
    polyunsaturated_fat: float = 0.0
    trans_fat: float = 0.0

    @classmethod
    def from_values(
        cls, values: dict[Nutrient, float], serving_size: float, unit: ServingUnit
    ) -> "NutritionFacts":
        """Build facts from parsed nutrient values."""
        return cls(
            serving_size=serving_size,
            unit=unit,
            **{nutrient.field: amount for nutrient, amount in values.items()},
        )

    def amount(self, nutrient: Nutrient) -> float:
        """Return the declared amount of a nutrient."""
        return getattr(self, nutrient.field)

    def declares(self, nutrient: Nutrient) -> bool:
        """Return True when the label lists a usable nonzero amount."""
        value = self.amount(nutrient)
        return bool(value) and not math.isnan(value)


@dataclass(frozen=True)
class ScaledNutrition:
    """Nutrient amounts for the consumed serving, as two-decimal strings."""

    energy: str
    protein: str
    carbohydrates: str
    added_sugars: str
    dietary_fiber: str
    total_fat: str
    saturated_fat: str
    monounsaturated_fat: str
    polyunsaturated_fat: str
    trans_fat: str
    sodium: str
    serving_size: float
    unit: ServingUnit
    scaling_factor: float

    def amount(self, nutrient: Nutrient) -> str:
        """Return the formatted scaled amount of a nutrient."""
        return getattr(self, nutrient.field)
