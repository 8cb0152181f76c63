"""Interactive collection of nutrition label data."""

import logging
import math
from dataclasses import dataclass
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from nutrition_calculator.adapters.console import Console
from nutrition_calculator.domain.nutrition import (
    Nutrient,
    NutritionFacts,
    ServingUnit,
)
from nutrition_calculator.domain.sessions import PromptState
from nutrition_calculator.errors import (
    InvalidServingSizeError,
    InvalidUnitError,
    MissingNutrientError,
    NutritionInputError,
)

NUTRITION_PROMPT = (
    'Enter the nutritional information in the format: "energy protein '
    "carbohydrates added_sugars dietary_fiber total_fat saturated_fat "
    'monounsaturated_fat polyunsaturated_fat trans_fat sodium" (you can skip '
    "optional values with space or leave them blank): "
)
UNIT_PROMPT = (
    "Is this product solid (grams) or liquid (milliliters)? "
    '(Enter "g" for solid or "ml" for liquid): '
)

_AMOUNT = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])
_SERVING_SIZE = TypeAdapter(Annotated[float, Field(gt=0, allow_inf_nan=False)])

_logger = logging.getLogger(__name__)


def parse_nutrition_line(line: str) -> dict[Nutrient, float]:
    """Parse a space separated nutrition line into nutrient amounts.

    Tokens are positional, so an empty token between two spaces skips an
    optional nutrient. Skipped optional nutrients resolve to 0 and
    unparseable optional ones to NaN. Mandatory nutrients must be numbers.
    """
    tokens = line.split(" ")
    values: dict[Nutrient, float] = {}
    for index, nutrient in enumerate(Nutrient):
        token = tokens[index].strip() if index < len(tokens) else ""
        if not token:
            if nutrient.mandatory:
                raise MissingNutrientError()
            values[nutrient] = 0.0
            continue
        try:
            values[nutrient] = _AMOUNT.validate_python(token)
        except ValidationError:
            if nutrient.mandatory:
                raise MissingNutrientError() from None
            values[nutrient] = math.nan
    return values


def parse_unit(raw: str) -> ServingUnit:
    """Parse the serving unit; only the exact tokens are accepted."""
    try:
        return ServingUnit(raw)
    except ValueError:
        raise InvalidUnitError() from None


def parse_serving_size(raw: str) -> float:
    """Parse a strictly positive, finite serving size."""
    try:
        return _SERVING_SIZE.validate_python(raw.strip())
    except ValidationError:
        raise InvalidServingSizeError() from None


@dataclass
class InputCollector:
    """Prompt sequence that produces validated nutrition facts."""

    console: Console
    debug: bool = False

    def collect(self) -> NutritionFacts:
        """Prompt until a complete label is entered.

        Any rejected answer restarts the sequence from the nutrition line.
        """
        state = PromptState.AWAITING_NUTRITION_LINE
        values: dict[Nutrient, float] = {}
        unit = ServingUnit.MASS
        while True:
            try:
                if state is PromptState.AWAITING_NUTRITION_LINE:
                    values = parse_nutrition_line(self.console.ask(NUTRITION_PROMPT))
                    state = PromptState.AWAITING_UNIT
                elif state is PromptState.AWAITING_UNIT:
                    unit = parse_unit(self.console.ask(UNIT_PROMPT))
                    state = PromptState.AWAITING_LABELED_SERVING_SIZE
                else:
                    serving_size = parse_serving_size(
                        self.console.ask(f"Enter the serving size in {unit.value}: ")
                    )
                    facts = NutritionFacts.from_values(values, serving_size, unit)
                    if self.debug:
                        _logger.info("Collected nutrition facts: %s", facts)
                    return facts
            except NutritionInputError as exc:
                if self.debug:
                    _logger.info("Rejected input in %s: %s", state.value, exc)
                self.console.error(str(exc))
                state = PromptState.AWAITING_NUTRITION_LINE

    def ask_consumed_serving_size(self, unit: ServingUnit) -> float:
        """Ask once for the consumed quantity; invalid input is not retried."""
        raw = self.console.ask(f"Enter the serving size you consumed (in {unit.value}): ")
        return parse_serving_size(raw)
