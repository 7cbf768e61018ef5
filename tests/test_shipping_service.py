"""Tests for shipment manifest aggregation."""

import pytest

from models.item import CatalogItem
from models.shipment import ShipmentEntry, ShipmentManifest
from services.shipping_service import build_manifest, ship


@pytest.fixture
def cheese():
    return CatalogItem("Cheese", price=100, quantity=5, weight=200)


@pytest.fixture
def biscuits():
    return CatalogItem("Biscuits", price=150, quantity=3, weight=700)


class TestBuildManifest:
    def test_groups_units_by_name(self, cheese, biscuits):
        manifest = build_manifest([cheese, cheese, biscuits])
        assert manifest.entries == [
            ShipmentEntry(name="Cheese", count=2, weight=400),
            ShipmentEntry(name="Biscuits", count=1, weight=700),
        ]

    def test_total_weight_is_sum_of_all_units(self, cheese, biscuits):
        manifest = build_manifest([cheese, cheese, biscuits])
        assert manifest.total_weight == 1100
        assert manifest.total_weight_kg == pytest.approx(1.1)

    def test_groups_follow_first_seen_order(self, cheese, biscuits):
        tv = CatalogItem("TV", price=1000, quantity=2, weight=10000)
        manifest = build_manifest([tv, cheese, tv, biscuits, cheese])
        assert [e.name for e in manifest.entries] == ["TV", "Cheese", "Biscuits"]
        assert [e.count for e in manifest.entries] == [2, 2, 1]

    def test_group_weight_is_unit_weight_times_count(self, cheese):
        manifest = build_manifest([cheese] * 4)
        assert manifest.entries[0].weight == cheese.weight * 4

    def test_empty_input(self):
        manifest = build_manifest([])
        assert manifest.is_empty()
        assert manifest.total_weight == 0


class TestManifestLines:
    def test_lines(self, cheese, biscuits):
        manifest = build_manifest([cheese, cheese, biscuits])
        assert manifest.lines() == [
            "** Shipment notice **",
            "2x Cheese 400g",
            "1x Biscuits 700g",
            "Total package weight 1.1kg",
        ]

    def test_weights_rendered_as_whole_grams(self):
        manifest = ShipmentManifest(
            entries=[ShipmentEntry(name="Salt", count=3, weight=301.2)],
            total_weight=301.2,
        )
        assert manifest.lines()[1:] == ["3x Salt 301g", "Total package weight 0.3kg"]


class TestShip:
    def test_ship_writes_manifest_to_sink(self, cheese, biscuits):
        out = []
        manifest = ship([cheese, cheese, biscuits], sink=out.append)
        assert out == manifest.lines()

    def test_ship_does_not_touch_stock(self, cheese):
        ship([cheese, cheese], sink=lambda _: None)
        assert cheese.quantity == 5
