# cartwalk/data/seed.py
from typing import List

from cartwalk.domain.schemas import Item


def seed_items() -> List[Item]:
    return [
        Item(name="APPLE", price=3.99),
        Item(name="BANANA", price=2.99),
    ]
