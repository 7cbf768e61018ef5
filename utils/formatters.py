# Text rendering shared by the shipment manifest and the receipt.
# Halves round up: 2.5 -> "3", 1250g -> "1.3kg".
from decimal import ROUND_HALF_UP, Decimal


def _half_up(v: float, places: str) -> Decimal:
    return Decimal(str(v)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def amount(v: float) -> str:
    return f"{_half_up(v, '1')}"


def grams(v: float) -> str:
    return f"{_half_up(v, '1')}g"


def kilograms(grams_total: float) -> str:
    return f"{_half_up(grams_total / 1000.0, '0.1')}kg"
