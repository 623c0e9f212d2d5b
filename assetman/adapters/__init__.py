"""
Assetman Adapters.

Implementations of protocols for external systems.
"""

from assetman.adapters.loader import (
    fetch_asset_status,
    fetch_fulfillment_started,
    get_asset_status_provider,
    get_fulfillment_status_provider,
    reset_providers,
)

__all__ = [
    "fetch_asset_status",
    "fetch_fulfillment_started",
    "get_asset_status_provider",
    "get_fulfillment_status_provider",
    "reset_providers",
]
