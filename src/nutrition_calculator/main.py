"""Command line entrypoint for the nutrition calculator."""

import logging
import sys

from nutrition_calculator.app_logging import configure_logging
from nutrition_calculator.config import Settings
from nutrition_calculator.containers import AppContainer, build_container
from nutrition_calculator.domain.sessions import PromptState
from nutrition_calculator.errors import InvalidServingSizeError
from nutrition_calculator.services.scaler import scale_nutrition

logger = logging.getLogger(__name__)


def run(container: AppContainer) -> int:
    """Run one calculator session and return the process exit status."""
    console = container.console
    debug = container.settings.debug
    state = PromptState.AWAITING_NUTRITION_LINE
    try:
        facts = container.input_collector.collect()
        state = PromptState.AWAITING_CONSUMED_SERVING_SIZE
        try:
            consumed = container.input_collector.ask_consumed_serving_size(facts.unit)
        except InvalidServingSizeError as exc:
            console.error(str(exc))
            return 1
        state = PromptState.REPORTING
        scaled = scale_nutrition(facts, consumed, debug=debug)
        container.reporter.emit(facts, scaled)
        return 0
    except EOFError:
        if debug:
            logger.info("Input closed while in %s", state.value)
        return 1
    finally:
        console.close()
        if debug:
            logger.info("Session %s", PromptState.TERMINATED.value)


def main() -> int:
    """Build the application and run a single session."""
    settings = Settings()
    configure_logging(debug=settings.debug)
    return run(build_container(settings))


def cli() -> None:
    """Console script wrapper."""
    sys.exit(main())
