"""
StockLocation and RoutingAssignment models — the routing side of inventory.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from assetman.models.enums import StockStatus


class StockLocationQuerySet(models.QuerySet):
    """QuerySet with helpers for routing queries."""

    def available(self):
        return self.filter(status=StockStatus.AVAILABLE)

    def for_assets(self, asset_ids):
        return self.filter(asset_id__in=list(asset_ids))

    def at_warehouse(self, warehouse):
        return self.filter(warehouse=warehouse)


class StockLocation(models.Model):
    """
    Stock entry of one asset at one warehouse.

    One row per (asset, warehouse). Status flips AVAILABLE → RESERVED when
    an order is routed to the warehouse; the flip is a conditional update
    so two orders racing for the same asset cannot both claim it.
    """

    asset_id = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('Asset'),
    )
    warehouse = models.ForeignKey(
        'assetman.Warehouse',
        on_delete=models.PROTECT,
        related_name='stock',
        verbose_name=_('Warehouse'),
    )
    status = models.CharField(
        max_length=20,
        choices=StockStatus.choices,
        default=StockStatus.AVAILABLE,
        db_index=True,
        verbose_name=_('Status'),
    )
    order_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        db_index=True,
        verbose_name=_('Order'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = StockLocationQuerySet.as_manager()

    class Meta:
        verbose_name = _('Stock entry')
        verbose_name_plural = _('Stock entries')
        ordering = ['warehouse__code', 'asset_id']
        constraints = [
            models.UniqueConstraint(
                fields=['asset_id', 'warehouse'],
                name='assetman_unique_stock_per_warehouse',
            )
        ]
        indexes = [
            models.Index(fields=['warehouse', 'status'], name='assetman_stock_wh_status_idx'),
        ]

    def __str__(self) -> str:
        suffix = f" [{self.order_id}]" if self.order_id else ""
        return f"{self.asset_id} @ {self.warehouse_id}: {self.status}{suffix}"


class RoutingAssignment(models.Model):
    """
    Binding decision: this order ships from this warehouse.

    order_id is unique so retried or duplicated routing requests can never
    create a second assignment. Once fulfillment has started downstream the
    assignment is final; the router refuses any further routing call.
    """

    order_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name=_('Order'),
    )
    warehouse = models.ForeignKey(
        'assetman.Warehouse',
        on_delete=models.PROTECT,
        related_name='assignments',
        verbose_name=_('Warehouse'),
    )
    assigned_at = models.DateTimeField(default=timezone.now, verbose_name=_('Assigned at'))

    class Meta:
        verbose_name = _('Routing assignment')
        verbose_name_plural = _('Routing assignments')
        ordering = ['-assigned_at']

    def __str__(self) -> str:
        return f"{self.order_id} → {self.warehouse_id}"
