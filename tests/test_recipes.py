"""Unit tests for recipe values and menu selection."""

import pytest
from pydantic import ValidationError

from coffee_shop.domain.models import DrinkKind
from coffee_shop.domain.recipes import (
    CAPPUCCINO,
    FLAT_WHITE,
    LATTE,
    RECIPES,
    UnknownSelectionError,
    menu_lines,
    parse_selection,
)


@pytest.mark.parametrize(
    "code, kind",
    [("1", DrinkKind.LATTE), ("2", DrinkKind.CAPPUCCINO), ("3", DrinkKind.FLAT_WHITE)],
)
def test_parse_selection_known_codes(code, kind):
    assert parse_selection(code) is kind


@pytest.mark.parametrize("code", ["4", "", "abc", " 1", "1 ", "latte"])
def test_parse_selection_unknown_codes(code):
    with pytest.raises(UnknownSelectionError) as exc_info:
        parse_selection(code)

    assert exc_info.value.selection == code
    assert isinstance(exc_info.value, ValueError)


def test_recipe_steps():
    assert (LATTE.take_cup(), LATTE.make_espresso(), LATTE.prepare_milk()) == (
        "Берем чашку 300 мл",
        "Делаем одинарный эспрессо",
        "Подготавливаем 250 мл молока",
    )
    assert (CAPPUCCINO.take_cup(), CAPPUCCINO.make_espresso(), CAPPUCCINO.prepare_milk()) == (
        "Берем чашку 200 мл",
        "Делаем одинарный эспрессо",
        "Подготавливаем 125 мл молока",
    )
    assert (FLAT_WHITE.take_cup(), FLAT_WHITE.make_espresso(), FLAT_WHITE.prepare_milk()) == (
        "Берем чашку 200 мл",
        "Делаем двойной эспрессо",
        "Подготавливаем 90 мл молока",
    )


def test_every_drink_has_a_recipe():
    assert set(RECIPES) == set(DrinkKind)
    assert all(recipe.kind is kind for kind, recipe in RECIPES.items())


def test_recipes_are_frozen():
    with pytest.raises(ValidationError):
        LATTE.cup = "Берем ведро"


def test_menu_lines():
    assert menu_lines() == ["1.Латте", "2.Капучино", "3.Флэт Уайт"]
