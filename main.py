import logging
from typing import Callable

from models.cart import Cart
from models.customer import Customer
from models.item import CatalogItem
from models.receipt import Receipt
from services.checkout_service import CheckoutService
from services.errors import CheckoutError
from utils.logger import setup_logger

logger = logging.getLogger("pos")


def build_catalog() -> dict[str, CatalogItem]:
    return {
        "Cheese": CatalogItem("Cheese", price=100, quantity=5, weight=200),
        "Biscuits": CatalogItem("Biscuits", price=150, quantity=3, weight=700),
        "TV": CatalogItem("TV", price=1000, quantity=2, weight=10000),
        # digital, nothing to ship
        "ScratchCard": CatalogItem("ScratchCard", price=50, quantity=10),
    }


def run_demo(sink: Callable[[str], None] = print, balance: float = 1000) -> Receipt | None:
    catalog = build_catalog()
    customer = Customer("Ahmed", balance=balance)

    cart = Cart()
    cart.add(catalog["Cheese"], 2)
    cart.add(catalog["Biscuits"], 1)
    cart.add(catalog["ScratchCard"], 1)

    checkout_service = CheckoutService(sink=sink)
    try:
        receipt = checkout_service.checkout(customer, cart)
    except CheckoutError as e:
        logger.warning(f"Demo checkout failed: {e}")
        sink(f"Error: {e}")
        return None

    logger.info("Catalog after checkout: " + ", ".join(str(it) for it in catalog.values()))
    return receipt


def main():
    setup_logger()
    run_demo()


if __name__ == "__main__":
    main()
