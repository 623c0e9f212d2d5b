"""
Status Protocols — read-only views of collaborators Assetman depends on.

Assetman defines these protocols; the asset service and the WMS implement
them (see assetman.adapters for HTTP and development implementations).

Implementations must fail loudly: raise UpstreamServiceError (or
AssetUnknownError) instead of guessing, so callers can fail closed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetStatusProvider(Protocol):
    """
    Protocol for reading an asset's lifecycle status.

    The returned string is opaque to Assetman: it is only ever passed
    through assetman.conf.is_sellable().
    """

    def get_status(self, asset_id: str) -> str:
        """
        Current status of the asset (e.g. "SELLABLE", "IN_REFURB").

        Args:
            asset_id: Serialized asset identifier

        Raises:
            AssetUnknownError: The asset does not exist
            UpstreamServiceError: The service could not answer
        """
        ...


@runtime_checkable
class FulfillmentStatusProvider(Protocol):
    """Protocol for asking the WMS whether it started working on an order."""

    def has_started(self, order_id: str) -> bool:
        """
        True once picking/assembly/shipping has begun for the order.

        Raises:
            UpstreamServiceError: The service could not answer
        """
        ...
