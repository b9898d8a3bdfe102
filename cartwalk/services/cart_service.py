# cartwalk/services/cart_service.py
from typing import Iterable, List

from cartwalk.domain.cart import Cart
from cartwalk.domain.operations import PriceTotal, discount, lowercase_name
from cartwalk.domain.schemas import CartOut, Item, ItemOut
from cartwalk.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases for the cart domain.
    commands (create, discount, normalize, finalize) modify the cart
    query (list) only reads it
    """

    #query
    def list_items(self, cart: Cart) -> List[ItemOut]:
        seen: List[ItemOut] = []
        cart.explore(seen.append)
        return seen

    #commands
    def create_cart(self, items: Iterable[Item] = ()) -> Cart:
        cart = Cart(items)
        logger.info(f"Created cart with {len(cart)} items")
        return cart

    def apply_discount(self, cart: Cart, factor: float) -> None:
        logger.info(f"Applying discount factor {factor} to {len(cart)} items")
        cart.traverse(discount(factor))

    def normalize_names(self, cart: Cart) -> None:
        logger.info(f"Lowercasing names of {len(cart)} items")
        cart.traverse(lowercase_name)

    def finalize_cart(self, cart: Cart) -> CartOut:
        """
        Check out the cart and sum its prices.
        The cart passed in cannot be used afterwards.
        """
        logger.info("Finalizing cart")

        def summarize(owned: Cart) -> CartOut:
            logger.info(f"Checked out {owned!r}")
            totals = PriceTotal()
            owned.traverse(totals)
            return CartOut(items=self.list_items(owned), total=totals.total)

        receipt = cart.checkout(summarize)

        logger.info(f"Cart finalized, {len(receipt.items)} items, total {receipt.formatted_total}")
        return receipt
