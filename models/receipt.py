from dataclasses import dataclass

from models.shipment import ShipmentManifest
from utils.formatters import amount
# Receipt model representing a settled checkout.
@dataclass
class ReceiptLine:
    name: str
    quantity: int
    line_total: float

@dataclass
class Receipt:
    lines: list[ReceiptLine]
    subtotal: float
    shipping_fee: float
    total: float
    balance: float
    manifest: ShipmentManifest | None = None

    def text_lines(self) -> list[str]:
        out = [">> Checkout receipt <<"]
        for line in self.lines:
            out.append(f"{line.quantity}x {line.name} {amount(line.line_total)}")
        out.append("----------------------")
        out.append(f"Subtotal {amount(self.subtotal)}")
        out.append(f"Shipping {amount(self.shipping_fee)}")
        out.append(f"Amount {amount(self.total)}")
        out.append(f"Customer balance {amount(self.balance)}")
        return out
