"""
Tests for the admin.
"""

import pytest
from django.contrib import admin
from django.urls import reverse

from assetman import inventory
from assetman.models import Location, Movement, Reservation, RoutingAssignment, StockLocation, Warehouse


pytestmark = pytest.mark.django_db


class TestRegistration:

    def test_all_models_registered(self):
        for model in (Warehouse, Location, Movement, Reservation, StockLocation, RoutingAssignment):
            assert admin.site.is_registered(model)

    def test_ledger_is_read_only(self, rf, admin_user):
        request = rf.get('/')
        request.user = admin_user
        model_admin = admin.site._registry[Movement]

        assert model_admin.has_add_permission(request) is False
        assert model_admin.has_change_permission(request) is False
        assert model_admin.has_delete_permission(request) is False

    def test_warehouse_changelist(self, admin_client, paris):
        response = admin_client.get(reverse('admin:assetman_warehouse_changelist'))

        assert response.status_code == 200


class TestReleaseAction:

    def test_release_selected(self, admin_client, dock):
        inventory.move_asset('A-1', dock)
        reservation = inventory.reserve_asset('A-1', 'ORD-1')

        response = admin_client.post(
            reverse('admin:assetman_reservation_changelist'),
            {'action': 'release_reservations', '_selected_action': [reservation.pk]},
        )

        assert response.status_code == 302
        assert not Reservation.objects.exists()
        assert inventory.history('A-1')[-1].reason == 'RELEASE'
