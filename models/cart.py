import logging
from dataclasses import dataclass

from models.item import CatalogItem

logger = logging.getLogger("pos.cart")
# Cart model representing a shopping cart.
# Lines hold shared references to catalog items, they do not own them.
@dataclass
class CartLine:
    item: CatalogItem
    quantity: int

    @property
    def line_total(self) -> float:
        return self.item.price * self.quantity

class Cart:
    def __init__(self):
        self._lines: list[CartLine] = []

    def add(self, item: CatalogItem, quantity: int = 1) -> bool:
        if quantity <= 0:
            raise ValueError("The quantity must be a positive number.")
        if quantity > item.quantity:
            # soft reject: report and keep building the cart
            logger.warning(
                f"Cannot add more than available stock for {item.name} "
                f"(requested={quantity}, available={item.quantity})"
            )
            return False
        self._lines.append(CartLine(item, quantity))
        return True

    def is_empty(self) -> bool:
        return not self._lines

    def items(self) -> list[CartLine]:
        return list(self._lines)

    def __len__(self):
        return len(self._lines)
