"""
In-memory status providers for tests.

State lives on the class so tests can steer the instance the loader
caches. The ``reset_fakes`` fixture clears it between tests.
"""

from assetman.exceptions import AssetUnknownError, UpstreamServiceError


class FakeAssetStatusProvider:
    statuses: dict[str, str] = {}
    unknown: set[str] = set()
    down = False
    default = 'SELLABLE'
    calls: list[str] = []

    @classmethod
    def reset(cls):
        cls.statuses = {}
        cls.unknown = set()
        cls.down = False
        cls.calls = []

    def get_status(self, asset_id: str) -> str:
        type(self).calls.append(asset_id)
        if self.down:
            raise UpstreamServiceError('asset-service', 'connection refused')
        if asset_id in self.unknown:
            raise AssetUnknownError(asset_id)
        return self.statuses.get(asset_id, self.default)


class FakeFulfillmentStatusProvider:
    started: set[str] = set()
    down = False

    @classmethod
    def reset(cls):
        cls.started = set()
        cls.down = False

    def has_started(self, order_id: str) -> bool:
        if self.down:
            raise RuntimeError('wms timeout')
        return order_id in self.started
