"""Dependency container wiring for the application."""

from collections.abc import Mapping
from dataclasses import dataclass

from nutrition_calculator.adapters.console import Console, StdioConsole
from nutrition_calculator.config import Settings
from nutrition_calculator.domain.daily_values import DAILY_VALUES
from nutrition_calculator.services.input_collector import InputCollector
from nutrition_calculator.services.reporter import Reporter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    console: Console
    daily_values: Mapping[str, float]
    input_collector: InputCollector
    reporter: Reporter


def build_container(
    settings: Settings | None = None, console: Console | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_console = console or StdioConsole()
    return AppContainer(
        settings=resolved_settings,
        console=resolved_console,
        daily_values=DAILY_VALUES,
        input_collector=InputCollector(
            console=resolved_console, debug=resolved_settings.debug
        ),
        reporter=Reporter(console=resolved_console, daily_values=DAILY_VALUES),
    )
