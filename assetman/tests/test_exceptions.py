"""
Tests for structured errors.
"""

from assetman.exceptions import (
    AssetAlreadyReservedError,
    AssetmanError,
    AssetNotSellableError,
    AssetUnknownError,
    InvalidInputError,
    NoWarehouseAvailableError,
    UpstreamServiceError,
)


class TestAssetmanError:

    def test_as_dict(self):
        error = AssetAlreadyReservedError('A-1', 'ORD-1')

        assert error.as_dict() == {
            'code': 'ASSET_ALREADY_RESERVED',
            'kind': 'conflict',
            'message': 'Asset A-1 is already reserved for order ORD-1',
            'data': {'asset_id': 'A-1', 'existing_order_ref': 'ORD-1'},
        }

    def test_kinds_are_distinguishable(self):
        assert NoWarehouseAvailableError('ORD-1', 'none').kind == 'capacity'
        assert UpstreamServiceError('wms-service', 'timeout').kind == 'upstream'
        assert AssetNotSellableError('A-1', 'SOLD').kind == 'precondition'

    def test_unknown_asset_is_upstream(self):
        error = AssetUnknownError('A-1')

        assert isinstance(error, UpstreamServiceError)
        assert error.code == 'ASSET_UNKNOWN'
        assert str(error) == 'Asset A-1 not found'

    def test_missing_template_data_keeps_template(self):
        assert InvalidInputError('REQUIRED_FIELDS').message == 'Missing required fields: {fields}'

    def test_custom_message(self):
        error = AssetmanError('CUSTOM', 'Something odd', ref=1)

        assert str(error) == 'Something odd'
        assert error.data == {'ref': 1}
