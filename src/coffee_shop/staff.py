"""
Shop staff: the subsystem behind the facade.

`Employee` is the base every member of staff shares: a name and the two
duties the facade knows how to sequence. `Barista` is the only concrete
employee. It can be driven through `ServiceFacade` or called directly; the
facade is a convenience, not a gatekeeper.

The barista never reaches for a global logger. Its `EventLog` is handed in at
construction and passed on to the brewing algorithm, so a test can swap the
journal for a `MemorySink`.
"""

import logging
from abc import ABC, abstractmethod

from coffee_shop.domain.models import DrinkKind
from coffee_shop.domain.recipes import RECIPES, UnknownSelectionError, parse_selection
from coffee_shop.services.brewing import brew
from coffee_shop.services.journal import EventLog

logger = logging.getLogger(__name__)


class Employee(ABC):
    """A named member of staff."""

    def __init__(self, name: str) -> None:
        # Checked here so a bad name fails before anything reaches the journal.
        if not name:
            raise ValueError("Employee name must not be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def make_drink(self, selection: str) -> DrinkKind | None: ...

    @abstractmethod
    def clean_tables(self) -> None: ...


class Barista(Employee):
    def __init__(self, name: str, journal: EventLog) -> None:
        super().__init__(name)
        self.journal = journal

    def make_drink(self, selection: str) -> DrinkKind | None:
        """Take an order by menu code and brew it.

        Returns the drink that was made, or None when the code is not on the
        menu. An unknown code adds nothing to the journal beyond the opening
        entry.
        """
        self.journal.record(f"Бариста {self.name} берется за приготовление напитка")
        try:
            kind = parse_selection(selection)
        except UnknownSelectionError as exc:
            logger.warning("%s: no drink made", exc)
            return None

        logger.info("Barista %s brewing %s", self.name, kind.value)
        brew(RECIPES[kind], self.journal)
        return kind

    def clean_tables(self) -> None:
        self.journal.record(f"Бариста {self.name} протирает столы")

    def __repr__(self) -> str:
        return f"Barista({self.name!r})"
