"""
Warehouse and Location models — where assets can be.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from assetman.models.enums import LocationKind


class Warehouse(models.Model):
    """
    A fulfilment site.

    Warehouses are created administratively and are never deleted once
    stock, locations or routing decisions point at them (PROTECT).

    Examples:
        Warehouse.objects.create(code='FR-PAR-01', name='Paris Nord', country='FR')
    """

    code = models.CharField(
        unique=True,
        max_length=32,
        verbose_name=_('Code'),
        help_text=_('Unique identifier (ex: FR-PAR-01)'),
    )
    name = models.CharField(
        max_length=100,
        verbose_name=_('Name'),
    )
    country = models.CharField(
        max_length=2,
        verbose_name=_('Country'),
        help_text=_('ISO 3166-1 alpha-2, upper case'),
    )
    active = models.BooleanField(
        default=True,
        db_index=True,
        verbose_name=_('Active'),
        help_text=_('Inactive warehouses are never considered for routing.'),
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _('Warehouse')
        verbose_name_plural = _('Warehouses')
        ordering = ['code']

    def save(self, *args, **kwargs):
        if self.country:
            self.country = self.country.upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.code} ({self.country})"


class Location(models.Model):
    """
    A bin, zone or dock inside a warehouse.

    Movements point at locations; the asset position is always the
    to_location of its latest movement.
    """

    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name='locations',
        verbose_name=_('Warehouse'),
    )
    code = models.CharField(
        max_length=50,
        verbose_name=_('Code'),
        help_text=_('Unique within the warehouse (ex: A-01-03)'),
    )
    kind = models.CharField(
        max_length=20,
        choices=LocationKind.choices,
        default=LocationKind.STORAGE,
        verbose_name=_('Type'),
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _('Location')
        verbose_name_plural = _('Locations')
        ordering = ['warehouse__code', 'code']
        constraints = [
            models.UniqueConstraint(
                fields=['warehouse', 'code'],
                name='assetman_unique_location_code',
            )
        ]

    @property
    def label(self) -> str:
        """Human-readable location code, e.g. 'FR-PAR-01/A-01-03'."""
        return f"{self.warehouse.code}/{self.code}"

    def __str__(self) -> str:
        return self.label
