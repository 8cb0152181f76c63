"""Percent of daily value calculations."""

from collections.abc import Mapping
from decimal import Decimal, localcontext

from nutrition_calculator.domain.nutrition import Nutrient
from nutrition_calculator.services.scaler import NOT_A_NUMBER, round_cents

NOT_AVAILABLE = "N/A"


def calculate_percentage(value: str, reference: float | None) -> str:
    """Return value as a percentage of reference, e.g. "22.42%"."""
    if not reference or value == NOT_A_NUMBER:
        return NOT_AVAILABLE
    amount = Decimal(value)
    with localcontext() as ctx:
        # keep 28 significant digits after the integer part
        ctx.prec = max(ctx.prec, amount.adjusted() + 31)
        percent = amount / Decimal(str(reference)) * 100
    return f"{round_cents(percent)}%"


def daily_value_percentage(
    nutrient: Nutrient, value: str, daily_values: Mapping[str, float]
) -> str:
    """Look up the nutrient's reference and compute its percentage."""
    return calculate_percentage(value, daily_values.get(nutrient.field))
