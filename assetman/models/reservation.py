"""
Reservation model — exclusive hold on a serialized asset.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Reservation(models.Model):
    """
    Exclusive hold of one asset for one order.

    LIFECYCLE:

        (none) ── reserve() ──► ACTIVE ── release() ──► (row deleted)

    At most one Reservation exists per asset. The unique constraint on
    asset_id is what arbitrates concurrent reserve() calls: the first insert
    wins, every other one fails with IntegrityError.

    Rows are never updated; the ledger keeps RESERVE/RELEASE movements
    for audit once the row is gone.
    """

    asset_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name=_('Asset'),
    )
    order_ref = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('Order'),
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _('Reservation')
        verbose_name_plural = _('Reservations')
        ordering = ['created_at', 'pk']

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValueError("Reservations are never updated; release and reserve again.")
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"🔒 {self.asset_id} → {self.order_ref}"
