"""
Warehouses — sites, their locations, and which assets each one stocks.
"""

import logging

from django.db import IntegrityError, transaction

from assetman.exceptions import (
    DuplicateLocationError,
    DuplicateWarehouseError,
    InvalidInputError,
    WarehouseNotFoundError,
)
from assetman.models.enums import LocationKind, StockStatus
from assetman.models.stock import StockLocation
from assetman.models.warehouse import Location, Warehouse

logger = logging.getLogger('assetman')


def _missing(**fields) -> list[str]:
    return [name for name, value in fields.items() if not value]


class Warehouses:
    """Warehouse, location and stock placement methods."""

    # ══════════════════════════════════════════════════════════════
    # WAREHOUSES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_warehouse(cls, code: str, name: str, country: str) -> Warehouse:
        """
        Create a warehouse.

        Raises:
            InvalidInputError: code, name or country missing
            DuplicateWarehouseError: code already used
        """
        missing = _missing(code=code, name=name, country=country)
        if missing:
            raise InvalidInputError('REQUIRED_FIELDS', fields=', '.join(missing))

        try:
            with transaction.atomic():
                warehouse = Warehouse.objects.create(code=code, name=name, country=country)
        except IntegrityError:
            raise DuplicateWarehouseError(code) from None

        logger.info(
            "inventory.warehouse.created",
            extra={"warehouse_code": warehouse.code, "country": warehouse.country},
        )
        return warehouse

    @classmethod
    def get_warehouse(cls, warehouse_id) -> Warehouse:
        if isinstance(warehouse_id, Warehouse):
            return warehouse_id
        try:
            return Warehouse.objects.get(pk=warehouse_id)
        except (Warehouse.DoesNotExist, ValueError, TypeError):
            raise WarehouseNotFoundError(warehouse_id) from None

    @classmethod
    def list_warehouses(cls, active_only: bool = False) -> list[Warehouse]:
        qs = Warehouse.objects.order_by('code')
        if active_only:
            qs = qs.filter(active=True)
        return list(qs)

    # ══════════════════════════════════════════════════════════════
    # LOCATIONS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_location(cls, warehouse, code: str, kind: str = LocationKind.STORAGE) -> Location:
        """
        Create a location inside a warehouse.

        Raises:
            WarehouseNotFoundError: unknown warehouse
            InvalidInputError: code missing or unknown kind
            DuplicateLocationError: code already used in this warehouse
        """
        warehouse = cls.get_warehouse(warehouse)
        if not code:
            raise InvalidInputError('REQUIRED_FIELDS', fields='code')
        if kind not in LocationKind.values:
            raise InvalidInputError('INVALID_LOCATION_KIND', kind=kind)

        try:
            with transaction.atomic():
                location = Location.objects.create(warehouse=warehouse, code=code, kind=kind)
        except IntegrityError:
            raise DuplicateLocationError(warehouse.pk, code) from None

        logger.info(
            "inventory.location.created",
            extra={"warehouse_code": warehouse.code, "location_code": code, "kind": kind},
        )
        return location

    @classmethod
    def list_locations(cls, warehouse) -> list[Location]:
        warehouse = cls.get_warehouse(warehouse)
        return list(warehouse.locations.order_by('code'))

    # ══════════════════════════════════════════════════════════════
    # STOCK
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def place_asset(cls, asset_id: str, warehouse) -> StockLocation:
        """
        Declare that a warehouse stocks an asset.

        Idempotent: an existing entry is returned as is, whatever its status.
        """
        if not asset_id:
            raise InvalidInputError('REQUIRED_FIELDS', fields='assetId')
        warehouse = cls.get_warehouse(warehouse)

        entry, created = StockLocation.objects.get_or_create(
            asset_id=asset_id,
            warehouse=warehouse,
            defaults={'status': StockStatus.AVAILABLE},
        )
        if created:
            logger.info(
                "inventory.stock.placed",
                extra={"asset_id": asset_id, "warehouse_code": warehouse.code},
            )
        return entry

    @classmethod
    def stock_locations(cls, asset_id: str) -> list[StockLocation]:
        return list(
            StockLocation.objects.filter(asset_id=asset_id)
            .select_related('warehouse')
            .order_by('warehouse__code')
        )
