"""
Enums for Assetman models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class LocationKind(models.TextChoices):
    """Role of a location inside a warehouse."""
    RECEIVING = 'RECEIVING', _('Receiving')
    STORAGE = 'STORAGE', _('Storage')
    ASSEMBLY = 'ASSEMBLY', _('Assembly')
    SHIPPING = 'SHIPPING', _('Shipping')


class MovementReason(models.TextChoices):
    """
    Why an asset movement was recorded.

    RESERVE and RELEASE do not relocate the asset: they are written with
    from_location == to_location so the ledger keeps the full story.
    """
    INTAKE = 'INTAKE', _('Intake')
    MOVE = 'MOVE', _('Move')
    RESERVE = 'RESERVE', _('Reservation')
    RELEASE = 'RELEASE', _('Release')
    SHIP = 'SHIP', _('Shipment')
    RETURN = 'RETURN', _('Return')


class StockStatus(models.TextChoices):
    """Status of an asset's stock entry at a warehouse."""
    AVAILABLE = 'AVAILABLE', _('Available')
    RESERVED = 'RESERVED', _('Reserved')
