"""
Assetman Models.

Core models for serialized inventory:
- Warehouse / Location: Where assets can be
- Movement: Immutable ledger of relocations (position is derived from it)
- Reservation: Exclusive hold of one asset for one order
- StockLocation: Per-warehouse availability used by routing
- RoutingAssignment: Binding order → warehouse decision
"""

from assetman.models.enums import LocationKind, MovementReason, StockStatus
from assetman.models.movement import Movement
from assetman.models.reservation import Reservation
from assetman.models.stock import RoutingAssignment, StockLocation
from assetman.models.warehouse import Location, Warehouse

__all__ = [
    'LocationKind',
    'MovementReason',
    'StockStatus',
    'Warehouse',
    'Location',
    'Movement',
    'Reservation',
    'StockLocation',
    'RoutingAssignment',
]
