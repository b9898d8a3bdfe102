# cartwalk/domain/cart.py
from typing import Iterable, Tuple, TypeVar

from cartwalk.domain.errors import CartCheckedOutError
from cartwalk.domain.operations import Finalizer, ItemOperation, ItemVisitor
from cartwalk.domain.schemas import Item, ItemOut

T = TypeVar("T")


class Cart:
    """
    Ordered, owning collection of Items.

    States:
    - active: traverse / explore / checkout allowed, any number of traversals
    - checked out: terminal, every operation raises CartCheckedOutError

    Items are copied on the way in, so a cart never shares an Item with
    the caller or with another cart.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items = [item.model_copy() for item in items]
        self._checked_out = False

    @classmethod
    def _adopt(cls, items: list) -> "Cart":
        #takes over an already owned list without copying
        cart = cls()
        cart._items = items
        return cart

    def _ensure_active(self) -> None:
        if self._checked_out:
            raise CartCheckedOutError()

    @property
    def is_checked_out(self) -> bool:
        return self._checked_out

    @property
    def items(self) -> Tuple[ItemOut, ...]:
        """Frozen snapshots; items change only through traverse."""
        self._ensure_active()
        return tuple(ItemOut.model_validate(item) for item in self._items)

    def __len__(self) -> int:
        self._ensure_active()
        return len(self._items)

    def __repr__(self) -> str:
        if self._checked_out:
            return "Cart(<checked out>)"
        return f"Cart(items={self._items!r})"

    def traverse(self, operation: ItemOperation) -> None:
        """
        Apply ``operation`` to every item in insertion order, once each.

        The operation mutates the item in place and may keep its own state
        between calls. The cart stays usable afterwards.
        """
        self._ensure_active()

        for item in self._items:
            #the operation may have checked the cart out
            self._ensure_active()
            operation(item)

    def explore(self, visitor: ItemVisitor) -> None:
        """Like traverse, but the visitor only gets frozen snapshots."""
        self._ensure_active()

        for item in self._items:
            self._ensure_active()
            visitor(ItemOut.model_validate(item))

    def checkout(self, finalizer: Finalizer[T]) -> T:
        """
        Consume the cart and hand its items to ``finalizer``.

        The finalizer is called exactly once with a new active cart that
        owns the items. This cart is checked out before the call, so it stays
        unusable even when the finalizer raises.
        """
        self._ensure_active()

        items, self._items = self._items, []
        self._checked_out = True

        return finalizer(Cart._adopt(items))
