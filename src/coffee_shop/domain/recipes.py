"""
Recipe variants (the variable half of the Template Method).

The brewing algorithm in services/brewing.py is fixed; only three of its steps
differ from drink to drink. Those three steps form the `RecipeSteps` protocol.
Each drink is a plain `Recipe` value that satisfies it, so adding a drink means
adding a value here, not subclassing the algorithm.

The shared pour-milk step is deliberately absent from the protocol: no recipe
can override it.
"""

from typing import Protocol

from pydantic import BaseModel, Field

from coffee_shop.domain.models import DrinkKind


class RecipeSteps(Protocol):
    """The variable steps of the brewing algorithm.

    Any object with these three methods satisfies the protocol (structural
    subtyping, no inheritance needed). Each method returns the line that the
    brewing algorithm prints and journals for that step.
    """

    def take_cup(self) -> str: ...

    def make_espresso(self) -> str: ...

    def prepare_milk(self) -> str: ...


class Recipe(BaseModel):
    """A stateless bundle of the three drink-specific step descriptions."""

    model_config = {"frozen": True}

    kind: DrinkKind
    title: str = Field(..., min_length=1)     # Menu label
    cup: str = Field(..., min_length=1)       # Cup size step
    espresso: str = Field(..., min_length=1)  # Espresso strength step
    milk: str = Field(..., min_length=1)      # Milk volume step

    def take_cup(self) -> str:
        return self.cup

    def make_espresso(self) -> str:
        return self.espresso

    def prepare_milk(self) -> str:
        return self.milk


LATTE = Recipe(
    kind=DrinkKind.LATTE,
    title="Латте",
    cup="Берем чашку 300 мл",
    espresso="Делаем одинарный эспрессо",
    milk="Подготавливаем 250 мл молока",
)

CAPPUCCINO = Recipe(
    kind=DrinkKind.CAPPUCCINO,
    title="Капучино",
    cup="Берем чашку 200 мл",
    espresso="Делаем одинарный эспрессо",
    milk="Подготавливаем 125 мл молока",
)

FLAT_WHITE = Recipe(
    kind=DrinkKind.FLAT_WHITE,
    title="Флэт Уайт",
    cup="Берем чашку 200 мл",
    espresso="Делаем двойной эспрессо",
    milk="Подготавливаем 90 мл молока",
)

RECIPES: dict[DrinkKind, Recipe] = {
    DrinkKind.LATTE: LATTE,
    DrinkKind.CAPPUCCINO: CAPPUCCINO,
    DrinkKind.FLAT_WHITE: FLAT_WHITE,
}

# Menu tokens as typed at the prompt. Exact match, no trimming.
SELECTION_CODES: dict[str, DrinkKind] = {
    "1": DrinkKind.LATTE,
    "2": DrinkKind.CAPPUCCINO,
    "3": DrinkKind.FLAT_WHITE,
}


class UnknownSelectionError(ValueError):
    """Raised when a menu token does not name any drink."""

    def __init__(self, selection: str) -> None:
        super().__init__(f"Unknown drink selection {selection!r}")
        self.selection = selection


def parse_selection(selection: str) -> DrinkKind:
    """Map a menu token to a drink, raising UnknownSelectionError otherwise."""
    try:
        return SELECTION_CODES[selection]
    except KeyError:
        raise UnknownSelectionError(selection) from None


def menu_lines() -> list[str]:
    """Numbered menu entries in selection-code order, e.g. "1.Латте"."""
    return [f"{code}.{RECIPES[kind].title}" for code, kind in SELECTION_CODES.items()]
