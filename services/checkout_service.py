# services/checkout_service.py

import logging
from contextlib import ExitStack, contextmanager
from typing import Callable

from config import settings
from models.cart import Cart, CartLine
from models.customer import Customer
from models.item import CatalogItem
from models.receipt import Receipt, ReceiptLine
from services import shipping_service
from services.errors import EmptyCart, ExpiredItem, InsufficientBalance, InsufficientStock

logger = logging.getLogger("pos.checkout")


@contextmanager
def exclusive(customer: Customer, lines: list[CartLine]):
    # Customer first, then each distinct item ordered by name. Every checkout
    # takes the locks in this order, so two checkouts cannot deadlock.
    distinct = {id(line.item): line.item for line in lines}
    ordered = sorted(distinct.values(), key=lambda it: (it.name, id(it)))
    with ExitStack() as stack:
        stack.enter_context(customer.lock)
        for item in ordered:
            stack.enter_context(item.lock)
        yield


class CheckoutService:
    def __init__(self, shipping_fee: float | None = None, sink: Callable[[str], None] = print):
        # sink receives the manifest and receipt one line at a time
        self.shipping_fee = settings.shipping_fee if shipping_fee is None else shipping_fee
        self.sink = sink

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """
        Validate the cart against current stock and the customer's balance,
        then settle it: ship, debit, reduce stock and emit the receipt.

        Raises a CheckoutError subclass on the first failed check. Nothing
        is mutated or emitted in that case.
        """
        lines = cart.items()
        if not lines:
            logger.warning(f"Checkout rejected for {customer.name}: cart is empty")
            raise EmptyCart()

        with exclusive(customer, lines):
            subtotal, to_ship = self._validate_lines(lines)

            shipping_fee = self.shipping_fee if to_ship else 0.0
            total = subtotal + shipping_fee

            if customer.balance < total:
                logger.warning(
                    f"Checkout rejected for {customer.name}: insufficient balance "
                    f"(balance={customer.balance}, total={total})"
                )
                raise InsufficientBalance(customer.balance, total)

            # From here on nothing can fail validation any more
            manifest = shipping_service.ship(to_ship, self.sink) if to_ship else None

            customer.deduct(total)

            receipt_lines: list[ReceiptLine] = []
            for line in lines:
                line.item.reduce_quantity(line.quantity)
                receipt_lines.append(
                    ReceiptLine(
                        name=line.item.name,
                        quantity=line.quantity,
                        line_total=line.line_total,
                    )
                )

            receipt = Receipt(
                lines=receipt_lines,
                subtotal=subtotal,
                shipping_fee=shipping_fee,
                total=total,
                balance=customer.balance,
                manifest=manifest,
            )

            for text in receipt.text_lines():
                self.sink(text)

        logger.info(
            f"Checkout success customer={customer.name}, lines={len(receipt_lines)}, "
            f"subtotal={subtotal}, shipping={shipping_fee}, total={total}, "
            f"balance_now={customer.balance}"
        )

        return receipt

    def _validate_lines(self, lines: list[CartLine]) -> tuple[float, list[CatalogItem]]:
        # Walk the lines in order and stop at the first bad one.
        # Stock is checked against everything requested so far for the same
        # item, so repeated lines cannot oversell it.
        subtotal = 0.0
        to_ship: list[CatalogItem] = []
        requested: dict[int, int] = {}

        for line in lines:
            item = line.item
            qty = line.quantity

            if item.expired:
                logger.warning(f"Checkout rejected: {item.name} is expired")
                raise ExpiredItem(item.name)

            wanted = requested.get(id(item), 0) + qty
            if wanted > item.quantity:
                logger.warning(
                    f"Checkout rejected: not enough {item.name} "
                    f"(requested={wanted}, available={item.quantity})"
                )
                raise InsufficientStock(item.name, wanted, item.quantity)
            requested[id(item)] = wanted

            # one shipment unit per piece
            if item.is_shippable:
                to_ship.extend([item] * qty)

            subtotal += item.price * qty

        return subtotal, to_ship
