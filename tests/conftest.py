"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_calculator.adapters.console import Console
from nutrition_calculator.config import Settings
from nutrition_calculator.domain.nutrition import NutritionFacts, ServingUnit

SCENARIO_LINE = "250 5 30 10 0 9 3 0 0 0 150"


@dataclass
class ScriptedConsole(Console):
    """Fake console that replays answers and records output."""

    answers: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    close_calls: int = 0

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("No scripted answers left")
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, debug=False)


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def scenario_facts() -> NutritionFacts:
    return NutritionFacts(
        energy=250,
        protein=5,
        carbohydrates=30,
        added_sugars=10,
        dietary_fiber=0,
        total_fat=9,
        saturated_fat=3,
        sodium=150,
        serving_size=50,
        unit=ServingUnit.MASS,
    )
