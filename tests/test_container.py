"""Tests for container wiring."""

from nutrition_calculator.adapters.console import StdioConsole
from nutrition_calculator.containers import build_container
from nutrition_calculator.domain.daily_values import DAILY_VALUES


def test_build_container_creates_services(settings, console) -> None:
    container = build_container(settings, console)

    assert container.input_collector.console is console
    assert container.reporter.console is console
    assert container.reporter.daily_values is DAILY_VALUES
    assert container.daily_values is DAILY_VALUES


def test_build_container_defaults_to_stdio(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.console, StdioConsole)
