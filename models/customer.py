import threading
from dataclasses import dataclass, field
# Customer model holding the balance a checkout is paid from.
@dataclass(eq=False)
class Customer:
    name: str
    balance: float
    lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def deduct(self, amount: float) -> None:
        if amount > self.balance:
            raise ValueError(f"Insufficient balance for {self.name}")
        self.balance -= amount
