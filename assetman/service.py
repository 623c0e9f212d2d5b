"""
Inventory Service — The single public interface for inventory operations.

Usage:
    from assetman import inventory, AssetmanError

    inventory.move_asset('A-1001', receiving_dock, reason='INTAKE')
    inventory.reserve_asset('A-1001', 'ORD-42')
    inventory.check_availability('A-1001')   # available=False, reserved for ORD-42
    inventory.assign_order_to_warehouse('ORD-42', 'FR', ['A-1001'])
"""

from assetman.models.enums import LocationKind, MovementReason
from assetman.services.assignments import AssignmentStore
from assetman.services.availability import AvailabilityResult, check_availability
from assetman.services.ledger import AssetPosition, MovementLedger
from assetman.services.reservations import ReservationStore
from assetman.services.routing import OrderRouter, RoutingResult
from assetman.services.scoring import WarehouseScore, WarehouseScoring
from assetman.services.warehouses import Warehouses


class Inventory:
    """
    Single interface for all inventory operations.

    Every state-changing method runs in a transaction and sends its
    domain signal only after commit. See the service modules for the
    locking and concurrency details of each one.
    """

    # ══════════════════════════════════════════════════════════════
    # LEDGER
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def move_asset(cls, asset_id: str, to_location, reason: str = MovementReason.MOVE,
                   from_location=None):
        """Record a movement. Returns the Movement."""
        return MovementLedger.record(asset_id, to_location, reason=reason, from_location=from_location)

    @classmethod
    def history(cls, asset_id: str) -> list:
        return MovementLedger.history(asset_id)

    @classmethod
    def current_position(cls, asset_id: str) -> AssetPosition:
        return MovementLedger.current_position(asset_id)

    @classmethod
    def movement_count(cls, asset_id: str) -> int:
        return MovementLedger.count(asset_id)

    # ══════════════════════════════════════════════════════════════
    # RESERVATIONS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def reserve_asset(cls, asset_id: str, order_ref: str):
        """Reserve an asset for an order. Returns the Reservation."""
        return ReservationStore.reserve(asset_id, order_ref)

    @classmethod
    def release_reservation(cls, asset_id: str) -> None:
        ReservationStore.release(asset_id)

    @classmethod
    def get_reservation(cls, asset_id: str):
        return ReservationStore.get(asset_id)

    @classmethod
    def check_availability(cls, asset_id: str) -> AvailabilityResult:
        return check_availability(asset_id)

    # ══════════════════════════════════════════════════════════════
    # ROUTING
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def score_warehouses(cls, asset_ids, customer_country: str) -> list[WarehouseScore]:
        return WarehouseScoring.score(asset_ids, customer_country)

    @classmethod
    def assign_order_to_warehouse(cls, order_id: str, customer_country: str,
                                  asset_ids) -> RoutingResult:
        """Route an order to a single warehouse. Idempotent per order."""
        return OrderRouter.assign_order(order_id, customer_country, asset_ids)

    @classmethod
    def get_assignment(cls, order_id: str):
        return AssignmentStore.get(order_id)

    # ══════════════════════════════════════════════════════════════
    # WAREHOUSES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create_warehouse(cls, code: str, name: str, country: str):
        return Warehouses.create_warehouse(code, name, country)

    @classmethod
    def get_warehouse(cls, warehouse_id):
        return Warehouses.get_warehouse(warehouse_id)

    @classmethod
    def list_warehouses(cls, active_only: bool = False) -> list:
        return Warehouses.list_warehouses(active_only=active_only)

    @classmethod
    def create_location(cls, warehouse, code: str, kind: str = LocationKind.STORAGE):
        return Warehouses.create_location(warehouse, code, kind)

    @classmethod
    def list_locations(cls, warehouse) -> list:
        return Warehouses.list_locations(warehouse)

    @classmethod
    def place_asset(cls, asset_id: str, warehouse):
        return Warehouses.place_asset(asset_id, warehouse)

    @classmethod
    def stock_locations(cls, asset_id: str) -> list:
        return Warehouses.stock_locations(asset_id)
