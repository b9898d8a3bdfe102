# cartwalk/domain/operations.py
"""
Callables accepted by Cart.

ItemOperation  - may be called any number of times, mutates one Item in place
ItemVisitor    - may be called any number of times, only reads a snapshot
Finalizer      - called exactly once, receives ownership of the whole Cart
"""
from typing import TYPE_CHECKING, Callable, TypeVar

from cartwalk.domain.schemas import Item, ItemOut

if TYPE_CHECKING:
    from cartwalk.domain.cart import Cart

T = TypeVar("T")

ItemOperation = Callable[[Item], None]
ItemVisitor = Callable[[ItemOut], None]
Finalizer = Callable[["Cart"], T]


def discount(factor: float) -> ItemOperation:
    """Build an operation multiplying every price by ``factor``."""

    def apply(item: Item) -> None:
        item.price *= factor

    return apply


def lowercase_name(item: Item) -> None:
    item.name = item.name.lower()


class PriceTotal:
    """
    Accumulator used as a traversal operation.
    Sums prices without touching the items.
    """

    def __init__(self, start: float = 0.0):
        self.total = start
        self.count = 0

    def __call__(self, item: Item) -> None:
        self.total += item.price
        self.count += 1

    @property
    def formatted(self) -> str:
        return f"{self.total:.2f}"
