"""Scale label nutrition to a consumed serving."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from nutrition_calculator.domain.nutrition import (
    Nutrient,
    NutritionFacts,
    ScaledNutrition,
)

NOT_A_NUMBER = "NaN"
_CENTS = Decimal("0.01")

_logger = logging.getLogger(__name__)


def format_amount(value: float) -> str:
    """Round half away from zero to two decimals and format as a string."""
    if not math.isfinite(value):
        return NOT_A_NUMBER
    return round_cents(Decimal(str(value)))


def round_cents(amount: Decimal) -> str:
    """Quantize to cents with enough precision for the integer digits."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def scale_nutrition(
    facts: NutritionFacts, consumed: float, *, debug: bool = False
) -> ScaledNutrition:
    """Scale every nutrient by consumed / labeled serving size."""
    scaling_factor = consumed / facts.serving_size
    amounts = {
        nutrient.field: format_amount(facts.amount(nutrient) * scaling_factor)
        for nutrient in Nutrient
    }
    if debug:
        _logger.info(
            "Scaling %s %s label to %s %s (factor=%s)",
            facts.serving_size,
            facts.unit.value,
            consumed,
            facts.unit.value,
            scaling_factor,
        )
    return ScaledNutrition(
        serving_size=consumed,
        unit=facts.unit,
        scaling_factor=scaling_factor,
        **amounts,
    )
