"""
Tests for warehouses, locations and stock placement.
"""

import pytest

from assetman import inventory
from assetman.exceptions import (
    DuplicateLocationError,
    DuplicateWarehouseError,
    InvalidInputError,
    WarehouseNotFoundError,
)
from assetman.models import LocationKind, StockLocation, StockStatus


pytestmark = pytest.mark.django_db


class TestWarehouses:

    def test_create_uppercases_country(self):
        warehouse = inventory.create_warehouse('ES-MAD', 'Madrid', 'es')

        assert warehouse.country == 'ES'
        assert warehouse.active is True
        assert str(warehouse) == 'ES-MAD (ES)'

    def test_duplicate_code(self, paris):
        with pytest.raises(DuplicateWarehouseError) as exc_info:
            inventory.create_warehouse('FR-PAR', 'Paris bis', 'FR')

        assert exc_info.value.data['warehouse_code'] == 'FR-PAR'

    def test_required_fields(self):
        with pytest.raises(InvalidInputError) as exc_info:
            inventory.create_warehouse('ES-MAD', '', '')

        assert exc_info.value.message == 'Missing required fields: name, country'

    def test_get_unknown(self):
        with pytest.raises(WarehouseNotFoundError):
            inventory.get_warehouse(424242)

    def test_list_ordered_by_code(self, paris, brussels, berlin):
        berlin.active = False
        berlin.save()

        assert [w.code for w in inventory.list_warehouses()] == ['BE-BRU', 'DE-BER', 'FR-PAR']
        assert [w.code for w in inventory.list_warehouses(active_only=True)] == ['BE-BRU', 'FR-PAR']


class TestLocations:

    def test_create_location(self, paris):
        location = inventory.create_location(paris.pk, 'SHIP-1', LocationKind.SHIPPING)

        assert location.warehouse == paris
        assert location.kind == LocationKind.SHIPPING
        assert location.label == 'FR-PAR/SHIP-1'

    def test_default_kind_is_storage(self, paris):
        assert inventory.create_location(paris, 'B-02').kind == LocationKind.STORAGE

    def test_unknown_warehouse(self, db):
        with pytest.raises(WarehouseNotFoundError):
            inventory.create_location(424242, 'B-02')

    def test_unknown_kind(self, paris):
        with pytest.raises(InvalidInputError) as exc_info:
            inventory.create_location(paris, 'B-02', 'ROOFTOP')

        assert exc_info.value.code == 'INVALID_LOCATION_KIND'

    def test_duplicate_code_in_same_warehouse(self, paris, dock):
        with pytest.raises(DuplicateLocationError):
            inventory.create_location(paris, 'DOCK-1')

    def test_same_code_in_other_warehouse(self, dock, lyon):
        assert inventory.create_location(lyon, 'DOCK-1').warehouse == lyon

    def test_list_locations(self, paris, dock, shelf):
        assert [loc.code for loc in inventory.list_locations(paris)] == ['A-01-03', 'DOCK-1']


class TestPlaceAsset:

    def test_place_asset_available(self, paris):
        entry = inventory.place_asset('A-1', paris)

        assert entry.status == StockStatus.AVAILABLE
        assert entry.order_id is None

    def test_place_asset_idempotent(self, paris):
        first = inventory.place_asset('A-1', paris)
        second = inventory.place_asset('A-1', paris.pk)

        assert first == second
        assert StockLocation.objects.count() == 1

    def test_stock_locations(self, paris, brussels):
        inventory.place_asset('A-1', paris)
        inventory.place_asset('A-1', brussels)

        assert [e.warehouse.code for e in inventory.stock_locations('A-1')] == ['BE-BRU', 'FR-PAR']
