# cartwalk/domain/errors.py


class CartError(Exception):
    """Base class for cart errors."""


class CartCheckedOutError(CartError, RuntimeError):
    """Raised when a cart is used after checkout."""

    def __init__(self, message: str = "Cart has already been checked out"):
        super().__init__(message)
