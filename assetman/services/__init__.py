"""
Inventory services — modular organization of inventory operations.

    from assetman.services import MovementLedger, ReservationStore, OrderRouter
"""

from assetman.services.assignments import AssignmentStore
from assetman.services.availability import AvailabilityResult, check_availability
from assetman.services.ledger import AssetPosition, MovementLedger
from assetman.services.reservations import ReservationStore
from assetman.services.routing import OrderRouter, RoutingResult
from assetman.services.scoring import WarehouseScore, WarehouseScoring
from assetman.services.warehouses import Warehouses

__all__ = [
    'AssetPosition',
    'AssignmentStore',
    'AvailabilityResult',
    'MovementLedger',
    'OrderRouter',
    'ReservationStore',
    'RoutingResult',
    'WarehouseScore',
    'WarehouseScoring',
    'Warehouses',
    'check_availability',
]
