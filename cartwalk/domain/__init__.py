from cartwalk.domain.cart import Cart
from cartwalk.domain.errors import CartError, CartCheckedOutError
from cartwalk.domain.schemas import Item, ItemOut, CartOut

__all__ = ["Cart", "CartError", "CartCheckedOutError", "Item", "ItemOut", "CartOut"]
