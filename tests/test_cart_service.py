"""
Tests for CartService and the entry point
"""

import io

import pytest

from cartwalk.domain.errors import CartCheckedOutError
from cartwalk.domain.schemas import Item
from cartwalk.main import main


class TestCartService:

    def test_create_cart(self, service):
        cart = service.create_cart([Item(name="apple", price=1.0)])
        assert len(cart) == 1

    def test_list_items(self, service, grocery_cart):
        items = service.list_items(grocery_cart)
        assert [(i.name, i.price) for i in items] == [("apple", 1.0), ("bread", 2.0)]

    def test_finalize_scenario_a(self, service, grocery_cart):
        service.apply_discount(grocery_cart, 0.85)

        receipt = service.finalize_cart(grocery_cart)

        assert receipt.formatted_total == "2.55"
        assert [i.price for i in receipt.items] == pytest.approx([0.85, 1.70])

    def test_finalize_consumes_cart(self, service, grocery_cart):
        service.finalize_cart(grocery_cart)

        with pytest.raises(CartCheckedOutError):
            service.normalize_names(grocery_cart)

    def test_finalize_empty_cart(self, service, empty_cart):
        receipt = service.finalize_cart(empty_cart)

        assert receipt.items == []
        assert receipt.total == 0.0
        assert receipt.formatted_total == "0.00"

    def test_normalize_names(self, service):
        cart = service.create_cart([Item(name="MILK", price=3.0)])

        service.normalize_names(cart)

        assert cart.items[0].name == "milk"
        assert cart.items[0].price == 3.0


class TestMain:

    def test_default_run_prints_total(self):
        out = io.StringIO()

        assert main(out=out) == 0
        # (3.99 + 2.99) * 0.85
        assert out.getvalue() == "5.93\n"

    def test_caller_supplied_items(self):
        out = io.StringIO()

        main(items=[Item(name="apple", price=1.0), Item(name="bread", price=2.0)], out=out)

        assert out.getvalue() == "2.55\n"

    def test_empty_items(self):
        out = io.StringIO()

        main(items=[], out=out)

        assert out.getvalue() == "0.00\n"
