# cartwalk/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List


class Item(BaseModel):
    """A named, priced entry in a cart. Fields are mutable, price is not validated."""

    name: str
    price: float


class ItemOut(BaseModel):
    """Read-only snapshot of an Item."""

    name: str
    price: float

    model_config = ConfigDict(frozen=True, from_attributes=True)


class CartOut(BaseModel):
    """Receipt of a checked-out cart."""

    items: List[ItemOut]
    total: float

    @property
    def formatted_total(self) -> str:
        return f"{self.total:.2f}"
