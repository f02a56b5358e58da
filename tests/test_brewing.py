"""Unit tests for the brewing template."""

import pytest

from coffee_shop.domain.recipes import CAPPUCCINO, FLAT_WHITE, LATTE
from coffee_shop.services.brewing import POUR_MILK_MESSAGE, START_MESSAGE, brew


def test_brew_order_in_journal(sink, journal):
    brew(LATTE, journal)

    assert sink.messages() == [
        "Начинаем готовить напиток!",
        "Берем чашку 300 мл",
        "Делаем одинарный эспрессо",
        "Подготавливаем 250 мл молока",
        "Вливаем молоко, готово!",
    ]


def test_brew_console_skips_announcement(journal, capsys):
    lines = brew(FLAT_WHITE, journal)

    out = capsys.readouterr().out.splitlines()
    assert out == lines == [
        "Берем чашку 200 мл",
        "Делаем двойной эспрессо",
        "Подготавливаем 90 мл молока",
        "Вливаем молоко, готово!",
    ]
    assert START_MESSAGE not in out


@pytest.mark.parametrize("recipe", [LATTE, CAPPUCCINO, FLAT_WHITE])
def test_pour_milk_is_shared(recipe, sink, journal):
    brew(recipe, journal)

    assert sink.messages()[-1] == POUR_MILK_MESSAGE


class DecafSteps:
    """Any object with the three step methods can be brewed."""

    def take_cup(self) -> str:
        return "cup"

    def make_espresso(self) -> str:
        return "decaf"

    def prepare_milk(self) -> str:
        return "oat milk"


def test_brew_accepts_any_recipe_steps(sink, journal):
    brew(DecafSteps(), journal)

    assert sink.messages() == [START_MESSAGE, "cup", "decaf", "oat milk", POUR_MILK_MESSAGE]
