"""
Django Assetman — serialized inventory and order-to-warehouse routing.

Every asset is a single tracked unit: its position is derived from an
append-only movement ledger, it can be reserved by at most one order,
and orders ship from exactly one warehouse.

Usage:
    from assetman import inventory, AssetmanError

    inventory.move_asset('A-1001', dock)
    inventory.reserve_asset('A-1001', 'ORD-42')
    inventory.assign_order_to_warehouse('ORD-42', 'FR', ['A-1001'])
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'inventory':
        from assetman.service import Inventory
        return Inventory
    elif name == 'AssetmanError':
        from assetman.exceptions import AssetmanError
        return AssetmanError
    elif name == 'Warehouse':
        from assetman.models.warehouse import Warehouse
        return Warehouse
    elif name == 'Location':
        from assetman.models.warehouse import Location
        return Location
    elif name == 'Movement':
        from assetman.models.movement import Movement
        return Movement
    elif name == 'Reservation':
        from assetman.models.reservation import Reservation
        return Reservation
    elif name == 'StockLocation':
        from assetman.models.stock import StockLocation
        return StockLocation
    elif name == 'RoutingAssignment':
        from assetman.models.stock import RoutingAssignment
        return RoutingAssignment
    elif name == 'MovementReason':
        from assetman.models.enums import MovementReason
        return MovementReason
    elif name == 'LocationKind':
        from assetman.models.enums import LocationKind
        return LocationKind
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'AssetmanError',
    'Warehouse',
    'Location',
    'Movement',
    'Reservation',
    'StockLocation',
    'RoutingAssignment',
    'MovementReason',
    'LocationKind',
]

__version__ = '0.1.0'
