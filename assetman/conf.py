"""
Assetman configuration.

Usage in settings.py:
    ASSETMAN = {
        "ASSET_STATUS_PROVIDER": "assetman.adapters.http.HttpAssetStatusProvider",
        "FULFILLMENT_STATUS_PROVIDER": "assetman.adapters.http.HttpFulfillmentStatusProvider",
        "ASSET_SERVICE_URL": "http://asset-service:3001",
        "WMS_SERVICE_URL": "http://wms-service:3006",
        "COLLABORATOR_TIMEOUT_SECONDS": 5.0,
        "SELLABLE_STATUSES": ("SELLABLE",),
    }
"""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings


def _default_weights() -> dict[str, int]:
    return {
        'SAME_COUNTRY': 10,
        'FULL_STOCK': 5,
        'SHORT_DELAY': 1,
    }


def _default_delays() -> dict[str, int]:
    # Business days, per destination country
    return {
        'FR': 2,
        'BE': 3,
        'DE': 3,
        'ES': 4,
        'IT': 4,
    }


@dataclass
class AssetmanSettings:
    """Assetman configuration settings."""

    # Collaborator backends (dotted paths)
    ASSET_STATUS_PROVIDER: str = "assetman.adapters.noop.NoopAssetStatusProvider"
    FULFILLMENT_STATUS_PROVIDER: str = "assetman.adapters.noop.NoopFulfillmentStatusProvider"

    # Used by the HTTP adapters
    ASSET_SERVICE_URL: str = "http://localhost:3001"
    WMS_SERVICE_URL: str = "http://localhost:3006"
    COLLABORATOR_TIMEOUT_SECONDS: float = 5.0

    # Asset statuses that may be reserved and sold
    SELLABLE_STATUSES: tuple[str, ...] = ("SELLABLE",)

    # Routing
    ROUTING_WEIGHTS: dict[str, int] = field(default_factory=_default_weights)
    SHORT_DELAY_THRESHOLD_DAYS: int = 2
    DELIVERY_DELAYS: dict[str, int] = field(default_factory=_default_delays)
    DEFAULT_DELIVERY_DELAY: int = 5


def get_assetman_settings() -> AssetmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "ASSETMAN", {})
    return AssetmanSettings(**{
        k: v for k, v in user_settings.items()
        if k in AssetmanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_assetman_settings(), name)


assetman_settings = _LazySettings()


def is_sellable(status: str | None) -> bool:
    """Single place deciding whether an asset status allows reservation and sale."""
    if not status:
        return False
    allowed = {s.upper() for s in assetman_settings.SELLABLE_STATUSES}
    return status.upper() in allowed
