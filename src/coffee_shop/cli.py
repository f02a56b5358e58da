"""
Console entry point: take one order at the counter.

Prints the greeting and the menu, reads a single line from standard input,
and hands it to the facade. One pass, no loop, no flags. The process exits 0
whether or not the selection was on the menu; only a journal write failure
ends the run with a traceback.

Usage:
    python -m coffee_shop.cli
    coffee-shop            # console script installed by pyproject.toml
"""

import logging

from coffee_shop.domain.models import ServiceResult, ServiceStatus
from coffee_shop.domain.recipes import menu_lines
from coffee_shop.facade import ServiceFacade
from coffee_shop.services.factory import ServiceFactory
from coffee_shop.staff import Barista

# The single barista on shift.
BARISTA_NAME = "Иван"

GREETING = "Добрый день! Что будете сегодня?"
UNKNOWN_SELECTION_NOTICE = "Такого напитка нет в меню."


def serve(facade: ServiceFacade, selection: str) -> ServiceResult:
    """Client side of the facade: it only ever sees complete_service()."""
    return facade.complete_service(selection)


def read_selection() -> str:
    try:
        return input()
    except EOFError:
        # Closed stdin behaves like an empty line.
        return ""


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    print(GREETING)
    print("\n".join(menu_lines()))
    selection = read_selection()

    journal = ServiceFactory.get_event_log()
    logger.info("Journal sink: %r", journal.sink)

    facade = ServiceFacade(Barista(BARISTA_NAME, journal))
    result = serve(facade, selection)

    if result.status is ServiceStatus.UNKNOWN_SELECTION:
        print(UNKNOWN_SELECTION_NOTICE)


if __name__ == "__main__":
    main()
