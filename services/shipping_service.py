import logging
from collections import Counter
from typing import Callable, Iterable, Protocol

from models.shipment import ShipmentEntry, ShipmentManifest

logger = logging.getLogger("pos.shipping")
# shipping_service.py turns the shippable units of a checkout into a manifest.
# One unit per physical piece: a cart line of Cheese x2 arrives as two units.


class ShippableUnit(Protocol):
    name: str
    weight: float


def build_manifest(units: Iterable[ShippableUnit]) -> ShipmentManifest:
    # Counter keeps first-seen order, so groups come out in the order the
    # units were handed in, not sorted.
    counts: Counter = Counter()
    unit_weights: dict[str, float] = {}
    total_weight = 0.0
    for unit in units:
        counts[unit.name] += 1
        unit_weights[unit.name] = unit.weight
        total_weight += unit.weight

    entries = [
        ShipmentEntry(name=name, count=count, weight=unit_weights[name] * count)
        for name, count in counts.items()
    ]
    return ShipmentManifest(entries=entries, total_weight=total_weight)


def ship(units: Iterable[ShippableUnit], sink: Callable[[str], None] = print) -> ShipmentManifest:
    """Build the manifest for ``units`` and write it to ``sink`` line by line."""
    manifest = build_manifest(units)
    for line in manifest.lines():
        sink(line)
    logger.info(
        f"Shipment manifest emitted: {len(manifest.entries)} group(s), "
        f"{manifest.total_weight:.0f}g"
    )
    return manifest
