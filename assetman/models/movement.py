"""
Movement model — Immutable ledger of asset relocations.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from assetman.models.enums import MovementReason


IMMUTABLE_MESSAGE = (
    "Movements are immutable. "
    "To correct a position, record a new Movement."
)


class MovementQuerySet(models.QuerySet):
    """Append-only: bulk update() and delete() are refused."""

    def for_asset(self, asset_id: str):
        return self.filter(asset_id=asset_id)

    def chronological(self):
        """Oldest first, in the order the database committed them."""
        return self.order_by('pk')

    def latest_for(self, asset_id: str):
        return self.for_asset(asset_id).select_related('to_location').order_by('-pk').first()

    def update(self, **kwargs):
        raise ValueError(IMMUTABLE_MESSAGE)

    def delete(self):
        raise ValueError(IMMUTABLE_MESSAGE)


class Movement(models.Model):
    """
    Immutable record of an asset relocation.

    Rules:
    - NEVER update() or delete()
    - Corrections are new Movements
    - The primary key gives the total order of an asset's history

    This is the ONLY source of an asset's position: nothing stores a
    "current location" field that could drift from the ledger.
    """

    asset_id = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('Asset'),
    )
    from_location = models.ForeignKey(
        'assetman.Location',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        verbose_name=_('From'),
    )
    to_location = models.ForeignKey(
        'assetman.Location',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        verbose_name=_('To'),
    )
    reason = models.CharField(
        max_length=20,
        choices=MovementReason.choices,
        verbose_name=_('Reason'),
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Date/Time'))

    objects = MovementQuerySet.as_manager()

    class Meta:
        verbose_name = _('Movement')
        verbose_name_plural = _('Movements')
        ordering = ['pk']
        indexes = [
            models.Index(fields=['asset_id', 'id'], name='assetman_movement_asset_idx'),
        ]

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValueError(IMMUTABLE_MESSAGE)

        if self.reason not in MovementReason.values:
            raise ValueError(f"Unknown movement reason: {self.reason!r}")

        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion — movements are immutable."""
        raise ValueError(IMMUTABLE_MESSAGE)

    def __str__(self) -> str:
        src = self.from_location_id or '-'
        dst = self.to_location_id or '-'
        return f"{self.asset_id}: {src} → {dst} | {self.reason}"
