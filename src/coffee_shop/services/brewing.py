"""
Brewing algorithm (the fixed half of the Template Method).

`brew()` is the template: it owns the order of the steps and the shared
pour-milk step, and asks the recipe only for the three steps that vary.

    Start → TakeCup → Espresso → Milk → Pour → Done

Linear, no branching, no retry. Every step except the opening announcement is
also printed to the console for the customer to see.
"""

import logging

from coffee_shop.domain.recipes import RecipeSteps
from coffee_shop.services.journal import EventLog

logger = logging.getLogger(__name__)

START_MESSAGE = "Начинаем готовить напиток!"
POUR_MILK_MESSAGE = "Вливаем молоко, готово!"


def _announce_step(line: str, journal: EventLog) -> str:
    print(line)
    journal.record(line)
    return line


def pour_milk(journal: EventLog) -> str:
    """Shared final step, identical for every recipe."""
    return _announce_step(POUR_MILK_MESSAGE, journal)


def brew(steps: RecipeSteps, journal: EventLog) -> list[str]:
    """Run the full brewing sequence for one recipe.

    Returns the console lines in the order they were produced. A failing
    journal write stops the sequence and propagates.
    """
    logger.info("Brewing with %r", steps)
    journal.record(START_MESSAGE)
    lines = [
        _announce_step(steps.take_cup(), journal),
        _announce_step(steps.make_espresso(), journal),
        _announce_step(steps.prepare_milk(), journal),
        pour_milk(journal),
    ]
    logger.info("Brew complete")
    return lines
