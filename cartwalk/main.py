# cartwalk/main.py
import sys
from typing import Iterable, Optional, TextIO

from cartwalk.data.seed import seed_items
from cartwalk.domain.schemas import Item
from cartwalk.services.cart_service import CartService
from cartwalk.utils.logging import get_logger
from cartwalk.utils.settings import DISCOUNT_FACTOR

logger = get_logger(__name__)


def main(items: Optional[Iterable[Item]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    svc = CartService()

    cart = svc.create_cart(seed_items() if items is None else items)
    svc.apply_discount(cart, DISCOUNT_FACTOR)
    svc.normalize_names(cart)

    receipt = svc.finalize_cart(cart)
    for item in receipt.items:
        logger.info(f"{item.name}: {item.price:.2f}")

    print(receipt.formatted_total, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
