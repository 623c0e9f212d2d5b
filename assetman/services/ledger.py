"""
Movement ledger — append-only history of asset relocations.

Position is never stored: it is the to_location of the latest Movement,
recomputed on every read. There is no update or delete path.
"""

from dataclasses import dataclass

from django.db import transaction

from assetman.exceptions import (
    InvalidInputError,
    InvalidReasonError,
    LocationNotFoundError,
    MissingDestinationError,
)
from assetman.models.enums import MovementReason
from assetman.models.movement import Movement
from assetman.models.warehouse import Location
from assetman.signals import asset_moved, emit_on_commit


@dataclass(frozen=True)
class AssetPosition:
    """Where an asset is, derived from its latest movement."""

    asset_id: str
    location_id: int | None
    location_code: str | None = None
    last_movement: Movement | None = None

    @property
    def is_known(self) -> bool:
        return self.location_id is not None


def _resolve_location(ref) -> Location:
    """Accept a Location or its id; raise LocationNotFoundError otherwise."""
    if isinstance(ref, Location):
        ref = ref.pk
    try:
        return Location.objects.select_related('warehouse').get(pk=ref)
    except (Location.DoesNotExist, ValueError, TypeError):
        raise LocationNotFoundError(ref) from None


class MovementLedger:
    """Append-only movement methods."""

    @classmethod
    def record(cls, asset_id: str, to_location, reason: str = MovementReason.MOVE,
               from_location=None) -> Movement:
        """
        Record an asset relocation.

        Validation happens before anything is written: a failed call
        never leaves a partial Movement behind.

        Raises:
            MissingDestinationError: to_location not given
            LocationNotFoundError: to_location or from_location unknown
            InvalidReasonError: reason is not a MovementReason
        """
        if not asset_id:
            raise InvalidInputError('REQUIRED_FIELDS', fields='assetId')
        if to_location is None or to_location == '':
            raise MissingDestinationError()
        if reason not in MovementReason.values:
            raise InvalidReasonError(reason)

        destination = _resolve_location(to_location)
        source = None
        if from_location is not None and from_location != '':
            source = _resolve_location(from_location)

        with transaction.atomic():
            movement = cls.append(
                asset_id,
                source.pk if source else None,
                destination.pk,
                reason,
            )
            emit_on_commit(
                asset_moved,
                "inventory.asset.moved",
                sender=Movement,
                movement=movement,
                movement_id=movement.pk,
                asset_id=asset_id,
                from_location=movement.from_location_id,
                to_location=movement.to_location_id,
                reason=reason,
            )

        return movement

    @classmethod
    def append(cls, asset_id: str, from_location_id: int | None,
               to_location_id: int | None, reason: str) -> Movement:
        """
        Write one Movement row. No validation, no signal.

        Used by record() and by reservation bookkeeping (RESERVE/RELEASE),
        which must join the caller's transaction.
        """
        return Movement.objects.create(
            asset_id=asset_id,
            from_location_id=from_location_id,
            to_location_id=to_location_id,
            reason=reason,
        )

    @classmethod
    def history(cls, asset_id: str) -> list[Movement]:
        """All movements of an asset, oldest first."""
        return list(
            Movement.objects.for_asset(asset_id)
            .select_related('from_location', 'to_location')
            .chronological()
        )

    @classmethod
    def current_position(cls, asset_id: str) -> AssetPosition:
        """
        Current position = to_location of the latest movement.

        No movement means the position is unknown (location_id is None).
        """
        last = Movement.objects.latest_for(asset_id)
        if last is None:
            return AssetPosition(asset_id=asset_id, location_id=None)

        return AssetPosition(
            asset_id=asset_id,
            location_id=last.to_location_id,
            location_code=last.to_location.code if last.to_location else None,
            last_movement=last,
        )

    @classmethod
    def count(cls, asset_id: str) -> int:
        return Movement.objects.for_asset(asset_id).count()
