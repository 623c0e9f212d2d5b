"""
Tests for management commands.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from assetman import inventory
from assetman.models import MovementReason


pytestmark = pytest.mark.django_db


class TestAssetPosition:

    def test_unknown_position(self):
        out = StringIO()
        call_command('asset_position', 'A-1', stdout=out)

        assert 'A-1: no known location' in out.getvalue()
        assert 'unavailable: Asset has no known location' in out.getvalue()

    def test_position_and_history(self, dock, shelf):
        inventory.move_asset('A-1', dock, reason=MovementReason.INTAKE)
        inventory.move_asset('A-1', shelf, from_location=dock)

        out = StringIO()
        call_command('asset_position', 'A-1', '--history', stdout=out)
        output = out.getvalue()

        assert 'A-1: at A-01-03' in output
        assert 'available' in output
        assert 'INTAKE' in output
        assert 'DOCK-1 -> A-01-03' in output
