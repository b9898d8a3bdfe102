"""Pytest configuration and fixtures"""
import os
import pytest

# Keep the documented defaults regardless of a local .env
os.environ.setdefault("DISCOUNT_FACTOR", "0.85")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from cartwalk.domain.cart import Cart
from cartwalk.domain.schemas import Item
from cartwalk.services.cart_service import CartService


@pytest.fixture
def grocery_cart():
    """Cart from scenario A"""
    return Cart([Item(name="apple", price=1.00), Item(name="bread", price=2.00)])


@pytest.fixture
def empty_cart():
    return Cart()


@pytest.fixture
def service():
    return CartService()
