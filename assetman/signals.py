"""
Domain signals for Assetman.

Sent after the surrounding transaction commits, so receivers never observe
a fact that was rolled back. Every signal carries a ``timestamp`` kwarg.

Usage:
    from django.dispatch import receiver
    from assetman.signals import warehouse_assigned

    @receiver(warehouse_assigned)
    def notify_wms(sender, order_id, warehouse_code, **kwargs):
        ...
"""

import logging

from django.db import transaction
from django.dispatch import Signal
from django.utils import timezone

logger = logging.getLogger('assetman')

# movement: Movement
asset_moved = Signal()

# reservation: Reservation
asset_reserved = Signal()

# asset_id, order_ref
asset_reservation_released = Signal()

# order_id, warehouse_id, warehouse_code
warehouse_assigned = Signal()

# asset_id, warehouse_code, order_id
asset_reserved_at_warehouse = Signal()

# order_id, reason, missing_asset_ids
routing_failed = Signal()


def emit(signal: Signal, event: str, sender=None, **payload):
    """Log the event and send the signal right away."""
    payload.setdefault('timestamp', timezone.now())
    logger.info(event, extra={k: str(v) for k, v in payload.items()})
    signal.send(sender=sender, **payload)


def emit_on_commit(signal: Signal, event: str, sender=None, **payload):
    """Log and send once the current transaction commits (immediately if none)."""
    transaction.on_commit(lambda: emit(signal, event, sender=sender, **payload))
