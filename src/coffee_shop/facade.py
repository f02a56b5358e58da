"""
ServiceFacade — one call for a full customer service.

The **Facade pattern** hides a multi-step sequence behind a single method.
The customer-facing code only knows `complete_service(selection)`; it never
learns that serving means "make the drink, then wipe the tables".

Execution flow:
    1. worker.make_drink(selection)   → journal + brewing (if on the menu)
    2. worker.clean_tables()          → journal

Step 2 always runs, even when step 1 made no drink. The result tells the
caller which of the two happened.
"""

import logging

from coffee_shop.domain.models import DrinkKind, ServiceResult, ServiceStatus
from coffee_shop.staff import Employee

logger = logging.getLogger(__name__)


class ServiceFacade:
    """Sequences a worker's duties for one order."""

    def __init__(self, worker: Employee) -> None:
        self.worker = worker

    def _result(self, selection: str, drink: DrinkKind | None) -> ServiceResult:
        """Build a ServiceResult for a finished service."""
        return ServiceResult(
            barista=self.worker.name,
            selection=selection,
            drink=drink,
            status=ServiceStatus.COMPLETED if drink is not None else ServiceStatus.UNKNOWN_SELECTION,
        )

    def complete_service(self, selection: str) -> ServiceResult:
        logger.info("Starting service by %s for selection %r", self.worker.name, selection)

        # Journal failures in either step propagate to the caller.
        drink = self.worker.make_drink(selection)
        self.worker.clean_tables()

        result = self._result(selection, drink)
        logger.info("Service by %s finished: %s", self.worker.name, result.status.value)
        return result
