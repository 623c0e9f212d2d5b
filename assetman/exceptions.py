"""
Exceptions for Assetman.

All errors are AssetmanError with a structured code for programmatic handling
and a kind telling callers how to react:

- validation: bad input, rejected before any mutation
- conflict: someone else got there first, do not retry blindly
- precondition: business rule not met
- capacity: the order cannot be fulfilled from a single site right now
- upstream: a collaborator could not be reached or answered with an error
"""

from typing import Any


class AssetmanError(Exception):
    """
    Structured exception for inventory and routing operations.

    Usage:
        try:
            inventory.reserve_asset('SRV-0042', 'ORDER-1')
        except AssetAlreadyReservedError as e:
            print(f"Already held by {e.data['existing_order_ref']}")

    Attributes:
        code: Error code for programmatic handling
        kind: Error family (validation, conflict, precondition, capacity, upstream)
        message: Human-readable message
        data: Additional context data
    """

    code = 'ASSETMAN_ERROR'
    kind = 'internal'

    _default_messages = {
        'ASSETMAN_ERROR': 'Inventory operation failed',
        'REQUIRED_FIELDS': 'Missing required fields: {fields}',
        'INVALID_LOCATION_KIND': 'Unknown location type {kind}',
        'MISSING_DESTINATION': 'toLocation is required for movement',
        'LOCATION_NOT_FOUND': 'Location {location_id} not found',
        'INVALID_REASON': 'Unknown movement reason {reason}',
        'ORDER_REF_REQUIRED': 'orderRef is required',
        'INVALID_ROUTING_REQUEST': 'orderId, customerCountry and assetIds are required',
        'WAREHOUSE_NOT_FOUND': 'Warehouse {warehouse_id} not found',
        'DUPLICATE_WAREHOUSE': 'Warehouse {warehouse_code} already exists',
        'DUPLICATE_LOCATION': 'Location {location_code} already exists in warehouse {warehouse_id}',
        'ASSET_ALREADY_RESERVED': 'Asset {asset_id} is already reserved for order {existing_order_ref}',
        'FULFILLMENT_ALREADY_STARTED': 'Cannot reassign warehouse for order {order_id}: fulfillment already started',
        'STOCK_CONFLICT': 'Asset {asset_id} is no longer available at warehouse {warehouse_code}',
        'ASSET_NOT_SELLABLE': 'Asset {asset_id} is not sellable (status: {current_status})',
        'ASSET_NOT_RESERVED': 'Asset {asset_id} is not reserved',
        'NO_WAREHOUSE_AVAILABLE': 'No warehouse available for order {order_id}: {reason}',
        'UPSTREAM_UNAVAILABLE': '{service} unavailable: {detail}',
        'ASSET_UNKNOWN': 'Asset {asset_id} not found',
    }

    def __init__(self, code: str | None = None, message: str | None = None, **data: Any):
        self.code = code or type(self).code
        self.data = data
        self.message = message or self._format_default()
        super().__init__(self.message)

    def _format_default(self) -> str:
        template = self._default_messages.get(self.code, self.code)
        try:
            return template.format(**self.data)
        except KeyError:
            return template

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'kind': self.kind,
            'message': self.message,
            'data': {k: str(v) if not isinstance(v, (int, float, bool, list, type(None))) else v
                     for k, v in self.data.items()},
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, data={self.data!r})"


# ══════════════════════════════════════════════════════════════
# VALIDATION
# ══════════════════════════════════════════════════════════════


class InvalidInputError(AssetmanError):
    kind = 'validation'


class MissingDestinationError(InvalidInputError):
    code = 'MISSING_DESTINATION'


class LocationNotFoundError(InvalidInputError):
    code = 'LOCATION_NOT_FOUND'

    def __init__(self, location_id, **data):
        super().__init__(location_id=location_id, **data)


class InvalidReasonError(InvalidInputError):
    code = 'INVALID_REASON'

    def __init__(self, reason, **data):
        super().__init__(reason=reason, **data)


class OrderRefRequiredError(InvalidInputError):
    code = 'ORDER_REF_REQUIRED'


class RoutingRequestInvalidError(InvalidInputError):
    code = 'INVALID_ROUTING_REQUEST'


class WarehouseNotFoundError(InvalidInputError):
    code = 'WAREHOUSE_NOT_FOUND'

    def __init__(self, warehouse_id, **data):
        super().__init__(warehouse_id=warehouse_id, **data)


class DuplicateWarehouseError(InvalidInputError):
    code = 'DUPLICATE_WAREHOUSE'

    def __init__(self, warehouse_code, **data):
        super().__init__(warehouse_code=warehouse_code, **data)


class DuplicateLocationError(InvalidInputError):
    code = 'DUPLICATE_LOCATION'

    def __init__(self, warehouse_id, location_code, **data):
        super().__init__(warehouse_id=warehouse_id, location_code=location_code, **data)


# ══════════════════════════════════════════════════════════════
# CONFLICT
# ══════════════════════════════════════════════════════════════


class ConflictError(AssetmanError):
    kind = 'conflict'


class AssetAlreadyReservedError(ConflictError):
    code = 'ASSET_ALREADY_RESERVED'

    def __init__(self, asset_id, existing_order_ref, **data):
        super().__init__(asset_id=asset_id, existing_order_ref=existing_order_ref, **data)

    @property
    def existing_order_ref(self) -> str:
        return self.data['existing_order_ref']


class FulfillmentAlreadyStartedError(ConflictError):
    code = 'FULFILLMENT_ALREADY_STARTED'

    def __init__(self, order_id, **data):
        super().__init__(order_id=order_id, **data)


class StockConflictError(ConflictError):
    code = 'STOCK_CONFLICT'

    def __init__(self, asset_id, warehouse_code, **data):
        super().__init__(asset_id=asset_id, warehouse_code=warehouse_code, **data)


# ══════════════════════════════════════════════════════════════
# PRECONDITION
# ══════════════════════════════════════════════════════════════


class PreconditionError(AssetmanError):
    kind = 'precondition'


class AssetNotSellableError(PreconditionError):
    code = 'ASSET_NOT_SELLABLE'

    def __init__(self, asset_id, current_status, **data):
        super().__init__(asset_id=asset_id, current_status=current_status, **data)

    @property
    def current_status(self) -> str:
        return self.data['current_status']


class AssetNotReservedError(PreconditionError):
    code = 'ASSET_NOT_RESERVED'

    def __init__(self, asset_id, **data):
        super().__init__(asset_id=asset_id, **data)


# ══════════════════════════════════════════════════════════════
# CAPACITY
# ══════════════════════════════════════════════════════════════


class NoWarehouseAvailableError(AssetmanError):
    code = 'NO_WAREHOUSE_AVAILABLE'
    kind = 'capacity'

    def __init__(self, order_id, reason, **data):
        super().__init__(order_id=order_id, reason=reason, **data)


# ══════════════════════════════════════════════════════════════
# UPSTREAM
# ══════════════════════════════════════════════════════════════


class UpstreamServiceError(AssetmanError):
    """A collaborator timed out, was unreachable or answered with an error."""

    code = 'UPSTREAM_UNAVAILABLE'
    kind = 'upstream'

    def __init__(self, service, detail, **data):
        super().__init__(service=service, detail=detail, **data)


class AssetUnknownError(UpstreamServiceError):
    """The asset service does not know this asset."""

    code = 'ASSET_UNKNOWN'

    def __init__(self, asset_id, **data):
        AssetmanError.__init__(self, asset_id=asset_id, service='asset-service', **data)
