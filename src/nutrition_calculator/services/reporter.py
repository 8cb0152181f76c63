"""Render the scaled nutrition report."""

from collections.abc import Mapping
from dataclasses import dataclass

from nutrition_calculator.adapters.console import Console
from nutrition_calculator.domain.nutrition import (
    Nutrient,
    NutritionFacts,
    ScaledNutrition,
)
from nutrition_calculator.services.percentages import daily_value_percentage
from nutrition_calculator.services.scaler import format_amount


def build_report(
    facts: NutritionFacts,
    scaled: ScaledNutrition,
    daily_values: Mapping[str, float],
) -> list[str]:
    """Build report lines; optional nutrients missing from the label are skipped."""
    lines = [
        "",
        f"Nutrition values for a serving of {format_amount(scaled.serving_size)} "
        f"{scaled.unit.value}:",
    ]
    for nutrient in Nutrient:
        if not nutrient.mandatory and not facts.declares(nutrient):
            continue
        value = scaled.amount(nutrient)
        percentage = daily_value_percentage(nutrient, value, daily_values)
        lines.append(f"{nutrient.label}: {value} {nutrient.unit} ({percentage})")
    return lines


@dataclass
class Reporter:
    """Writes the report to the console."""

    console: Console
    daily_values: Mapping[str, float]

    def emit(self, facts: NutritionFacts, scaled: ScaledNutrition) -> None:
        for line in build_report(facts, scaled, self.daily_values):
            self.console.write(line)
