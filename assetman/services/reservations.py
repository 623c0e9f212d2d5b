"""
Reservations — exclusive holds on serialized assets (reserve, release).

The unique constraint on Reservation.asset_id is the arbiter: reserve()
inserts first and lets the database reject the loser. There is no
check-then-insert window.
"""

import logging

from django.db import IntegrityError, transaction

from assetman.adapters.loader import fetch_asset_status
from assetman.conf import is_sellable
from assetman.exceptions import (
    AssetAlreadyReservedError,
    AssetNotReservedError,
    AssetNotSellableError,
    InvalidInputError,
    OrderRefRequiredError,
)
from assetman.models.enums import MovementReason
from assetman.models.reservation import Reservation
from assetman.services.ledger import MovementLedger
from assetman.signals import asset_reservation_released, asset_reserved, emit_on_commit

logger = logging.getLogger('assetman')


class ReservationStore:
    """Reservation lifecycle methods."""

    @classmethod
    def reserve(cls, asset_id: str, order_ref: str) -> Reservation:
        """
        Reserve an asset for an order.

        1. The asset status must be sellable (asked to the status provider)
        2. Reservation row inserted under the unique constraint on asset_id
        3. RESERVE movement appended in the same transaction
        4. asset_reserved sent after commit

        Raises:
            AssetNotSellableError: status is not sellable
            AssetAlreadyReservedError: another order holds the asset
            UpstreamServiceError: the status could not be read (fail closed)

        Concurrency:
            - N simultaneous calls for one asset: exactly one insert commits,
              the others hit IntegrityError and report the winner's order.
            - If the winner is released before the loser reads it back, the
              conflict is still raised with existing_order_ref 'unknown'.
        """
        if not asset_id:
            raise InvalidInputError('REQUIRED_FIELDS', fields='assetId')
        if not order_ref:
            raise OrderRefRequiredError()

        status = fetch_asset_status(asset_id)
        if not is_sellable(status):
            raise AssetNotSellableError(asset_id, status)

        try:
            with transaction.atomic():
                reservation = Reservation.objects.create(asset_id=asset_id, order_ref=order_ref)

                position = MovementLedger.current_position(asset_id)
                MovementLedger.append(
                    asset_id,
                    position.location_id,
                    position.location_id,
                    MovementReason.RESERVE,
                )

                emit_on_commit(
                    asset_reserved,
                    "inventory.asset.reserved",
                    sender=Reservation,
                    reservation=reservation,
                    reservation_id=reservation.pk,
                    asset_id=asset_id,
                    order_ref=order_ref,
                )
        except IntegrityError:
            existing = (
                Reservation.objects.filter(asset_id=asset_id)
                .values_list('order_ref', flat=True)
                .first()
            )
            logger.info(
                "inventory.reserve.conflict",
                extra={"asset_id": asset_id, "order_ref": order_ref, "existing": existing},
            )
            raise AssetAlreadyReservedError(asset_id, existing or 'unknown') from None

        return reservation

    @classmethod
    def release(cls, asset_id: str) -> None:
        """
        Release an asset's reservation.

        RELEASE movement appended, row deleted, signal sent after commit.

        Raises:
            AssetNotReservedError: nothing to release
        """
        with transaction.atomic():
            reservation = (
                Reservation.objects.select_for_update()
                .filter(asset_id=asset_id)
                .first()
            )
            if reservation is None:
                raise AssetNotReservedError(asset_id)

            position = MovementLedger.current_position(asset_id)
            MovementLedger.append(
                asset_id,
                position.location_id,
                position.location_id,
                MovementReason.RELEASE,
            )
            order_ref = reservation.order_ref
            reservation.delete()

            emit_on_commit(
                asset_reservation_released,
                "inventory.asset.reservation_released",
                sender=Reservation,
                asset_id=asset_id,
                order_ref=order_ref,
            )

    @classmethod
    def get(cls, asset_id: str) -> Reservation | None:
        return Reservation.objects.filter(asset_id=asset_id).first()

    @classmethod
    def for_order(cls, order_ref: str) -> list[Reservation]:
        """All reservations held by an order, oldest first."""
        return list(Reservation.objects.filter(order_ref=order_ref).order_by('created_at', 'pk'))
