import threading
from dataclasses import dataclass, field
# CatalogItem model representing a purchasable item and its stock level.
# weight is in grams and only set for items that need physical shipping.
@dataclass(eq=False)
class CatalogItem:
    name: str
    price: float
    quantity: int
    weight: float | None = None
    expired: bool = False
    lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("The price must not be negative.")
        if self.quantity < 0:
            raise ValueError("The quantity must not be negative.")
        if self.weight is not None and self.weight <= 0:
            raise ValueError("The weight must be a positive number.")

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    def reduce_quantity(self, qty: int) -> None:
        if qty > self.quantity:
            raise ValueError(f"Insufficient stock for {self.name}")
        self.quantity -= qty

    def __str__(self):
        return f"{self.name} ({self.quantity} left)"
