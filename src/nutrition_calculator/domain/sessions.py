"""Prompt states for an interactive calculator run."""

from enum import Enum


class PromptState(Enum):
    """Where the calculator is in its prompt sequence."""

    AWAITING_NUTRITION_LINE = "AWAITING_NUTRITION_LINE"
    AWAITING_UNIT = "AWAITING_UNIT"
    AWAITING_LABELED_SERVING_SIZE = "AWAITING_LABELED_SERVING_SIZE"
    AWAITING_CONSUMED_SERVING_SIZE = "AWAITING_CONSUMED_SERVING_SIZE"
    REPORTING = "REPORTING"
    TERMINATED = "TERMINATED"
