# errors.py
# Checkout rejections. They are all validation failures: the checkout is
# aborted before anything is mutated and the caller decides how to report it.


class CheckoutError(ValueError):
    pass


class EmptyCart(CheckoutError):
    def __init__(self):
        super().__init__("Cart is empty.")


class ExpiredItem(CheckoutError):
    def __init__(self, item_name: str):
        self.item_name = item_name
        super().__init__(f"Product {item_name} is expired.")


class InsufficientStock(CheckoutError):
    def __init__(self, item_name: str, requested: int, available: int):
        self.item_name = item_name
        self.requested = requested
        self.available = available
        super().__init__(f"Not enough quantity for {item_name}")


class InsufficientBalance(CheckoutError):
    def __init__(self, balance: float, amount: float):
        self.balance = balance
        self.amount = amount
        super().__init__("Insufficient balance.")
