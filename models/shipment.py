from dataclasses import dataclass, field

from utils.formatters import grams, kilograms
# Shipment manifest produced for the shippable part of a checkout.
# Weights are in grams.
@dataclass
class ShipmentEntry:
    name: str
    count: int
    weight: float

@dataclass
class ShipmentManifest:
    entries: list[ShipmentEntry] = field(default_factory=list)
    total_weight: float = 0.0

    @property
    def total_weight_kg(self) -> float:
        return self.total_weight / 1000.0

    def is_empty(self) -> bool:
        return not self.entries

    def lines(self) -> list[str]:
        out = ["** Shipment notice **"]
        for e in self.entries:
            out.append(f"{e.count}x {e.name} {grams(e.weight)}")
        out.append(f"Total package weight {kilograms(self.total_weight)}")
        return out
