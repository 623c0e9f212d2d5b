"""
Pytest fixtures for Assetman tests.
"""

import pytest

from assetman.adapters import reset_providers
from assetman.models import Location, LocationKind, StockLocation, Warehouse
from assetman.tests.fakes import FakeAssetStatusProvider, FakeFulfillmentStatusProvider


@pytest.fixture(autouse=True)
def reset_fakes():
    """Fresh collaborator state and provider cache for every test."""
    FakeAssetStatusProvider.reset()
    FakeFulfillmentStatusProvider.reset()
    reset_providers()
    yield
    reset_providers()


@pytest.fixture
def asset_status():
    """Steer asset statuses: asset_status.statuses['A-1'] = 'REFURBISHING'."""
    return FakeAssetStatusProvider


@pytest.fixture
def fulfillment():
    """Steer fulfillment: fulfillment.started.add('ORD-1')."""
    return FakeFulfillmentStatusProvider


# ══════════════════════════════════════════════════════════════
# WAREHOUSES
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def paris(db):
    return Warehouse.objects.create(code='FR-PAR', name='Paris Nord', country='FR')


@pytest.fixture
def lyon(db):
    return Warehouse.objects.create(code='FR-LYS', name='Lyon Est', country='FR')


@pytest.fixture
def brussels(db):
    return Warehouse.objects.create(code='BE-BRU', name='Bruxelles', country='BE')


@pytest.fixture
def berlin(db):
    return Warehouse.objects.create(code='DE-BER', name='Berlin', country='DE')


@pytest.fixture
def dock(paris):
    """Receiving dock in Paris."""
    return Location.objects.create(warehouse=paris, code='DOCK-1', kind=LocationKind.RECEIVING)


@pytest.fixture
def shelf(paris):
    """Storage shelf in Paris."""
    return Location.objects.create(warehouse=paris, code='A-01-03', kind=LocationKind.STORAGE)


@pytest.fixture
def stock(db):
    """Place assets: stock(warehouse, 'A-1', 'A-2')."""
    def place(warehouse, *asset_ids):
        return [
            StockLocation.objects.create(asset_id=asset_id, warehouse=warehouse)
            for asset_id in asset_ids
        ]
    return place
