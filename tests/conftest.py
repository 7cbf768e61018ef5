import logging

import pytest

from models.cart import Cart
from models.customer import Customer
from models.item import CatalogItem
from services.checkout_service import CheckoutService


@pytest.fixture
def catalog():
    """Fresh catalog for every test, since checkouts mutate stock."""
    return {
        "Cheese": CatalogItem("Cheese", price=100, quantity=5, weight=200),
        "Biscuits": CatalogItem("Biscuits", price=150, quantity=3, weight=700),
        "TV": CatalogItem("TV", price=1000, quantity=2, weight=10000),
        "ScratchCard": CatalogItem("ScratchCard", price=50, quantity=10),
    }


@pytest.fixture
def customer():
    return Customer("Ahmed", balance=1000)


@pytest.fixture
def cart(catalog):
    cart = Cart()
    cart.add(catalog["Cheese"], 2)
    cart.add(catalog["Biscuits"], 1)
    cart.add(catalog["ScratchCard"], 1)
    return cart


@pytest.fixture
def output():
    return []


@pytest.fixture
def service(output):
    return CheckoutService(shipping_fee=30, sink=output.append)


@pytest.fixture
def pos_logger():
    """The "pos" logger with no handlers, restored after the test."""
    logger = logging.getLogger("pos")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    logger.handlers.clear()

    yield logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
