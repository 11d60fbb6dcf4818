import logging

import pytest

from beverage_shop.menu.beverage import Americano, Condiment, CondimentDecorator, MochaDecorator, WhipDecorator
from beverage_shop.menu.receipt import Receipt, itemize


def test_itemize_base_beverage():
    df = itemize(Americano())

    assert list(df.columns) == ["item", "cost"]
    assert df.values.tolist() == [["Americano", 2.0]]

def test_itemize_lists_condiments_innermost_first():
    beverage = WhipDecorator(MochaDecorator(Americano()))

    df = itemize(beverage)

    assert df['item'].tolist() == ["Americano", "Mocha", "Whip"]
    assert df['cost'].tolist() == [2.0, 1.0, 0.5]

def test_itemized_total_matches_cost():
    beverage = Condiment(WhipDecorator(Americano()), "Oat Milk", 0.75)

    df = itemize(beverage)

    assert df['cost'].sum() == pytest.approx(beverage.get_cost())

def test_receipt_show_logs_lines_and_total(caplog):
    caplog.set_level(logging.INFO)

    Receipt().show(WhipDecorator(Americano()))

    text = caplog.text
    assert "Receipt for Americano with Whip:" in text
    assert "Americano" in text and "2.00" in text
    assert "Whip" in text and "0.50" in text
    assert "Total" in text and "2.50" in text


class Caramel(CondimentDecorator):
    def get_description(self) -> str:
        return self._beverage.get_description() + " with Caramel"

    def get_cost(self) -> float:
        return self._beverage.get_cost() + 0.75


def test_itemize_condiment_with_own_methods():
    beverage = WhipDecorator(Caramel(Americano()))

    df = itemize(beverage)

    assert df['item'].tolist() == ["Americano", "Caramel", "Whip"]
    assert df['cost'].tolist() == pytest.approx([2.0, 0.75, 0.5])
    assert df['cost'].sum() == pytest.approx(beverage.get_cost())
