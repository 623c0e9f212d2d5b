"""
Tests for availability verdicts.
"""

import pytest

from assetman import inventory
from assetman.models import MovementReason


pytestmark = pytest.mark.django_db


class TestCheckAvailability:
    """Tests for inventory.check_availability()."""

    def test_no_known_location(self, db):
        """Sellable, unreserved, never moved: unavailable."""
        result = inventory.check_availability('A-1')

        assert result.available is False
        assert result.location is None
        assert 'no known location' in result.reason

    def test_available_with_location_code(self, dock):
        inventory.move_asset('A-1', dock, reason=MovementReason.INTAKE)

        result = inventory.check_availability('A-1')

        assert result.available is True
        assert result.location == 'DOCK-1'
        assert result.reason is None

    def test_unknown_asset(self, asset_status):
        asset_status.unknown.add('A-1')

        result = inventory.check_availability('A-1')

        assert result.available is False
        assert 'not found or service unavailable' in result.reason

    def test_service_down(self, asset_status, dock):
        inventory.move_asset('A-1', dock)
        asset_status.down = True

        result = inventory.check_availability('A-1')

        assert result.available is False
        assert 'not found or service unavailable' in result.reason

    def test_not_sellable_reports_status(self, asset_status, dock):
        inventory.move_asset('A-1', dock)
        asset_status.statuses['A-1'] = 'REFURBISHING'

        result = inventory.check_availability('A-1')

        assert result.available is False
        assert 'REFURBISHING' in result.reason

    def test_reserved_reports_order(self, dock):
        inventory.move_asset('A-1', dock)
        inventory.reserve_asset('A-1', 'ORD-7')

        result = inventory.check_availability('A-1')

        assert result.available is False
        assert 'ORD-7' in result.reason

    def test_status_checked_before_reservation(self, asset_status, dock):
        """First failing condition wins."""
        inventory.move_asset('A-1', dock)
        inventory.reserve_asset('A-1', 'ORD-7')
        asset_status.statuses['A-1'] = 'SOLD'

        result = inventory.check_availability('A-1')

        assert 'SOLD' in result.reason
        assert 'ORD-7' not in result.reason

    def test_as_dict(self, dock):
        inventory.move_asset('A-1', dock)

        assert inventory.check_availability('A-1').as_dict() == {
            'available': True,
            'location': 'DOCK-1',
            'reason': None,
        }
