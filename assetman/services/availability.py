"""
Availability — a single verdict composed from status, reservation and ledger.

Read-only, never raises for collaborator trouble: an unreachable status
service makes the asset unavailable.
"""

import logging
from dataclasses import asdict, dataclass

from assetman.adapters.loader import fetch_asset_status
from assetman.conf import is_sellable
from assetman.exceptions import UpstreamServiceError
from assetman.models.reservation import Reservation
from assetman.services.ledger import MovementLedger

logger = logging.getLogger('assetman')


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    location: str | None = None
    reason: str | None = None

    def as_dict(self) -> dict:
        return asdict(self)


def check_availability(asset_id: str) -> AvailabilityResult:
    """
    Is this asset available for sale right now?

    First failing condition wins:
    1. status unknown (asset or service missing)
    2. status not sellable
    3. active reservation
    4. no known location
    """
    try:
        status = fetch_asset_status(asset_id)
    except UpstreamServiceError as exc:
        logger.warning(
            "inventory.availability.upstream_error",
            extra={"asset_id": asset_id, "error_code": exc.code},
        )
        return AvailabilityResult(
            available=False,
            reason='Asset not found or service unavailable',
        )

    if not is_sellable(status):
        return AvailabilityResult(
            available=False,
            reason=f'Asset status is {status}, not SELLABLE',
        )

    reservation = Reservation.objects.filter(asset_id=asset_id).first()
    if reservation is not None:
        return AvailabilityResult(
            available=False,
            reason=f'Asset reserved for order {reservation.order_ref}',
        )

    position = MovementLedger.current_position(asset_id)
    if not position.is_known:
        return AvailabilityResult(
            available=False,
            reason='Asset has no known location',
        )

    return AvailabilityResult(available=True, location=position.location_code)
