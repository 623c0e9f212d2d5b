"""
HTTP Status Providers — talk to the asset service and the WMS over HTTP.

Every call is bounded by ASSETMAN['COLLABORATOR_TIMEOUT_SECONDS']. Timeouts,
transport errors, unexpected status codes and malformed bodies all raise
UpstreamServiceError: callers fail closed, they never assume success.

Settings:
    ASSETMAN = {
        "ASSET_STATUS_PROVIDER": "assetman.adapters.http.HttpAssetStatusProvider",
        "FULFILLMENT_STATUS_PROVIDER": "assetman.adapters.http.HttpFulfillmentStatusProvider",
        "ASSET_SERVICE_URL": "http://asset-service:3001",
        "WMS_SERVICE_URL": "http://wms-service:3006",
    }
"""

from __future__ import annotations

import logging

import httpx

from assetman.conf import assetman_settings
from assetman.exceptions import AssetUnknownError, UpstreamServiceError

logger = logging.getLogger(__name__)


class _HttpProvider:
    """Shared client construction and error mapping."""

    service_name = "upstream"

    def __init__(self, base_url: str | None = None, timeout: float | None = None,
                 transport: httpx.BaseTransport | None = None):
        self.base_url = (base_url or self._default_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else assetman_settings.COLLABORATOR_TIMEOUT_SECONDS
        self._transport = transport

    def _default_base_url(self) -> str:
        raise NotImplementedError

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    def _get_json(self, path: str) -> httpx.Response:
        try:
            with self._client() as client:
                return client.get(path)
        except httpx.TimeoutException as exc:
            logger.warning("%s timed out: %s", self.service_name, path)
            raise UpstreamServiceError(
                self.service_name, f"timed out after {self.timeout}s", path=path,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s unreachable: %s (%s)", self.service_name, path, exc)
            raise UpstreamServiceError(self.service_name, str(exc), path=path) from exc

    def _payload(self, response: httpx.Response) -> dict:
        if response.status_code != 200:
            raise UpstreamServiceError(
                self.service_name,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamServiceError(self.service_name, "invalid JSON body") from exc
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            # Services wrap payloads as {"success": true, "data": {...}}
            body = body["data"]
        if not isinstance(body, dict):
            raise UpstreamServiceError(self.service_name, "unexpected response body")
        return body


class HttpAssetStatusProvider(_HttpProvider):
    """Reads ``GET {ASSET_SERVICE_URL}/assets/{asset_id}`` and returns ``status``."""

    service_name = "asset-service"

    def _default_base_url(self) -> str:
        return assetman_settings.ASSET_SERVICE_URL

    def get_status(self, asset_id: str) -> str:
        response = self._get_json(f"/assets/{asset_id}")
        if response.status_code == 404:
            raise AssetUnknownError(asset_id)

        status = self._payload(response).get("status")
        if not isinstance(status, str) or not status:
            raise UpstreamServiceError(self.service_name, "asset has no status", asset_id=asset_id)
        return status


class HttpFulfillmentStatusProvider(_HttpProvider):
    """
    Reads ``GET {WMS_SERVICE_URL}/orders/{order_id}/status``.

    A 404 means the WMS never heard of the order: nothing started.
    """

    service_name = "wms-service"

    def _default_base_url(self) -> str:
        return assetman_settings.WMS_SERVICE_URL

    def has_started(self, order_id: str) -> bool:
        response = self._get_json(f"/orders/{order_id}/status")
        if response.status_code == 404:
            return False

        started = self._payload(response).get("started")
        if not isinstance(started, bool):
            raise UpstreamServiceError(self.service_name, "missing 'started' flag", order_id=order_id)
        return started
