"""
Noop Status Providers — Stub adapters for development and testing.

These adapters implement the status protocols with trivial defaults:
- Every asset is SELLABLE
- No order has started fulfillment

Usage in settings.py:
    ASSETMAN = {
        "ASSET_STATUS_PROVIDER": "assetman.adapters.noop.NoopAssetStatusProvider",
        "FULFILLMENT_STATUS_PROVIDER": "assetman.adapters.noop.NoopFulfillmentStatusProvider",
    }

WARNING: Do NOT use in production. These adapters perform no real lookup
and will happily reserve assets that are still in refurbishing.
"""

from __future__ import annotations


class NoopAssetStatusProvider:
    """
    No-operation asset status provider.

    Suitable for:

    - Local development without a running asset service
    - CI pipelines where the asset service is unavailable
    """

    status = "SELLABLE"

    def get_status(self, asset_id: str) -> str:
        """Always returns ``SELLABLE``."""
        return self.status


class NoopFulfillmentStatusProvider:
    """No-operation fulfillment provider: nothing has ever started."""

    def has_started(self, order_id: str) -> bool:
        return False
