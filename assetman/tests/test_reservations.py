"""
Tests for reservations.
"""

import threading

import pytest
from django.db import IntegrityError, connection

from assetman import inventory
from assetman.exceptions import (
    AssetAlreadyReservedError,
    AssetNotReservedError,
    AssetNotSellableError,
    OrderRefRequiredError,
    UpstreamServiceError,
)
from assetman.models import Movement, MovementReason, Reservation


pytestmark = pytest.mark.django_db


class TestReserve:
    """Tests for inventory.reserve_asset()."""

    def test_reserve_sellable_asset(self, dock):
        inventory.move_asset('A-1', dock, reason=MovementReason.INTAKE)

        reservation = inventory.reserve_asset('A-1', 'ORD-1')

        assert reservation.asset_id == 'A-1'
        assert reservation.order_ref == 'ORD-1'
        assert inventory.get_reservation('A-1') == reservation

    def test_reserve_appends_reserve_movement_in_place(self, dock):
        inventory.move_asset('A-1', dock, reason=MovementReason.INTAKE)

        inventory.reserve_asset('A-1', 'ORD-1')

        last = inventory.history('A-1')[-1]
        assert last.reason == MovementReason.RESERVE
        assert last.from_location_id == dock.pk
        assert last.to_location_id == dock.pk
        assert inventory.current_position('A-1').location_id == dock.pk

    def test_second_reservation_conflicts(self, dock):
        """Scenario: second order asks for an asset already held."""
        inventory.reserve_asset('A-1', 'ORD-1')

        with pytest.raises(AssetAlreadyReservedError) as exc_info:
            inventory.reserve_asset('A-1', 'ORD-2')

        assert exc_info.value.existing_order_ref == 'ORD-1'
        assert Reservation.objects.get(asset_id='A-1').order_ref == 'ORD-1'
        assert Movement.objects.filter(asset_id='A-1', reason=MovementReason.RESERVE).count() == 1

    def test_not_sellable(self, asset_status):
        asset_status.statuses['A-1'] = 'REFURBISHING'

        with pytest.raises(AssetNotSellableError) as exc_info:
            inventory.reserve_asset('A-1', 'ORD-1')

        assert exc_info.value.current_status == 'REFURBISHING'
        assert not Reservation.objects.exists()

    def test_status_case_insensitive(self, asset_status):
        asset_status.statuses['A-1'] = 'sellable'

        assert inventory.reserve_asset('A-1', 'ORD-1').order_ref == 'ORD-1'

    def test_fails_closed_when_status_service_down(self, asset_status):
        asset_status.down = True

        with pytest.raises(UpstreamServiceError):
            inventory.reserve_asset('A-1', 'ORD-1')

        assert not Reservation.objects.exists()

    def test_order_ref_required(self, db):
        with pytest.raises(OrderRefRequiredError):
            inventory.reserve_asset('A-1', '')

    def test_for_order(self, db):
        from assetman.services import ReservationStore

        inventory.reserve_asset('A-1', 'ORD-1')
        inventory.reserve_asset('A-2', 'ORD-1')
        inventory.reserve_asset('A-3', 'ORD-2')

        assert [r.asset_id for r in ReservationStore.for_order('ORD-1')] == ['A-1', 'A-2']


class TestReserveRace:
    """Another order commits its reservation while ours is in flight."""

    def test_loser_reports_winner(self, asset_status, monkeypatch):
        def status_then_competitor(self, asset_id):
            Reservation.objects.create(asset_id=asset_id, order_ref='ORD-WINNER')
            return 'SELLABLE'

        monkeypatch.setattr(asset_status, 'get_status', status_then_competitor)

        with pytest.raises(AssetAlreadyReservedError) as exc_info:
            inventory.reserve_asset('A-1', 'ORD-LOSER')

        assert exc_info.value.existing_order_ref == 'ORD-WINNER'
        assert list(Reservation.objects.values_list('order_ref', flat=True)) == ['ORD-WINNER']
        assert not Movement.objects.filter(asset_id='A-1', reason=MovementReason.RESERVE).exists()

    def test_winner_gone_before_lookup(self, monkeypatch):
        def lost_insert(**kwargs):
            raise IntegrityError('UNIQUE constraint failed: assetman_reservation.asset_id')

        monkeypatch.setattr(Reservation.objects, 'create', lost_insert)

        with pytest.raises(AssetAlreadyReservedError) as exc_info:
            inventory.reserve_asset('A-1', 'ORD-LOSER')

        assert exc_info.value.existing_order_ref == 'unknown'


class TestRelease:
    """Tests for inventory.release_reservation()."""

    def test_release_then_reserve_again(self, dock):
        inventory.move_asset('A-1', dock)
        inventory.reserve_asset('A-1', 'ORD-1')

        assert inventory.release_reservation('A-1') is None
        assert inventory.get_reservation('A-1') is None

        assert inventory.reserve_asset('A-1', 'ORD-2').order_ref == 'ORD-2'

    def test_release_appends_release_movement(self, dock):
        inventory.move_asset('A-1', dock)
        inventory.reserve_asset('A-1', 'ORD-1')
        inventory.release_reservation('A-1')

        reasons = [m.reason for m in inventory.history('A-1')]
        assert reasons == [MovementReason.MOVE, MovementReason.RESERVE, MovementReason.RELEASE]

    def test_release_without_reservation(self, db):
        with pytest.raises(AssetNotReservedError):
            inventory.release_reservation('A-1')


@pytest.mark.django_db(transaction=True)
@pytest.mark.skipif(
    connection.vendor != 'postgresql',
    reason='Concurrent writers need a database with real row-level concurrency',
)
class TestConcurrentReservations:
    """Exactly one of N simultaneous reservations wins."""

    def test_one_winner(self):
        results = []
        barrier = threading.Barrier(5)

        def attempt(order_ref):
            barrier.wait()
            try:
                inventory.reserve_asset('A-RACE', order_ref)
                results.append(('ok', order_ref))
            except AssetAlreadyReservedError:
                results.append(('conflict', order_ref))
            finally:
                connection.close()

        threads = [threading.Thread(target=attempt, args=(f'ORD-{i}',)) for i in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len([r for r in results if r[0] == 'ok']) == 1
        assert Reservation.objects.filter(asset_id='A-RACE').count() == 1
