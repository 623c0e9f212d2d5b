"""
Provider loading — resolve collaborator backends from settings.

Usage:
    from assetman.adapters import get_asset_status_provider

    provider = get_asset_status_provider()
    provider.get_status("SRV-0042")

Settings:
    ASSETMAN = {
        "ASSET_STATUS_PROVIDER": "assetman.adapters.http.HttpAssetStatusProvider",
        "FULFILLMENT_STATUS_PROVIDER": "assetman.adapters.http.HttpFulfillmentStatusProvider",
    }

Both default to the noop adapters. A path that cannot be imported raises
ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from assetman.conf import assetman_settings
from assetman.exceptions import AssetmanError, UpstreamServiceError
from assetman.protocols.status import AssetStatusProvider, FulfillmentStatusProvider

logger = logging.getLogger(__name__)


# Cached provider instances
_lock = threading.Lock()
_asset_status_provider: AssetStatusProvider | None = None
_fulfillment_status_provider: FulfillmentStatusProvider | None = None


def _load(setting_name: str):
    path = getattr(assetman_settings, setting_name)
    if not path:
        raise ImproperlyConfigured(f"ASSETMAN['{setting_name}'] must be configured.")
    try:
        provider_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import {setting_name} '{path}': {e}"
        ) from e
    logger.debug("Loaded %s: %s", setting_name, path)
    return provider_class()


def get_asset_status_provider() -> AssetStatusProvider:
    """Return the configured asset status provider."""
    global _asset_status_provider

    if _asset_status_provider is None:
        with _lock:
            if _asset_status_provider is None:  # double-checked
                _asset_status_provider = _load("ASSET_STATUS_PROVIDER")

    return _asset_status_provider


def get_fulfillment_status_provider() -> FulfillmentStatusProvider:
    """Return the configured fulfillment status provider."""
    global _fulfillment_status_provider

    if _fulfillment_status_provider is None:
        with _lock:
            if _fulfillment_status_provider is None:
                _fulfillment_status_provider = _load("FULFILLMENT_STATUS_PROVIDER")

    return _fulfillment_status_provider


def reset_providers() -> None:
    """Reset the cached providers. Useful for testing."""
    global _asset_status_provider, _fulfillment_status_provider
    _asset_status_provider = None
    _fulfillment_status_provider = None


def fetch_asset_status(asset_id: str) -> str:
    """
    Ask the configured provider for an asset's status, failing closed.

    Anything other than a structured Assetman error is wrapped in
    UpstreamServiceError so callers see a single upstream kind.
    """
    try:
        return get_asset_status_provider().get_status(asset_id)
    except AssetmanError:
        raise
    except Exception as exc:
        logger.warning("asset status lookup failed for %s: %s", asset_id, exc)
        raise UpstreamServiceError("asset-service", str(exc), asset_id=asset_id) from exc


def fetch_fulfillment_started(order_id: str) -> bool:
    """Ask the configured provider whether fulfillment started, failing closed."""
    try:
        return bool(get_fulfillment_status_provider().has_started(order_id))
    except AssetmanError:
        raise
    except Exception as exc:
        logger.warning("fulfillment status lookup failed for %s: %s", order_id, exc)
        raise UpstreamServiceError("wms-service", str(exc), order_id=order_id) from exc
