"""
Order routing — pick the single warehouse that ships an order.

Rules:
- one warehouse per order, never a split shipment
- an order is never re-routed once fulfillment has started downstream
- repeated calls for the same order return the same assignment
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from django.db import transaction
from django.utils import timezone

from assetman.adapters.loader import fetch_fulfillment_started
from assetman.exceptions import (
    FulfillmentAlreadyStartedError,
    NoWarehouseAvailableError,
    RoutingRequestInvalidError,
    StockConflictError,
)
from assetman.models.enums import StockStatus
from assetman.models.stock import RoutingAssignment, StockLocation
from assetman.services.assignments import AssignmentStore
from assetman.services.scoring import WarehouseScoring, estimate_delay, unique_asset_ids
from assetman.signals import (
    asset_reserved_at_warehouse,
    emit,
    emit_on_commit,
    routing_failed,
    warehouse_assigned,
)

logger = logging.getLogger('assetman')


@dataclass(frozen=True)
class RoutingResult:
    order_id: str
    warehouse_id: int
    warehouse_code: str
    estimated_delay_days: int
    assets_reserved: tuple[str, ...]
    calculated_at: datetime
    created: bool = True

    def as_dict(self) -> dict:
        return {
            'order_id': self.order_id,
            'warehouse_id': self.warehouse_id,
            'warehouse_code': self.warehouse_code,
            'estimated_delay_days': self.estimated_delay_days,
            'assets_reserved': list(self.assets_reserved),
            'calculated_at': self.calculated_at.isoformat(),
            'created': self.created,
        }


def _existing_result(assignment: RoutingAssignment, customer_country: str) -> RoutingResult:
    warehouse = assignment.warehouse
    reserved = (
        StockLocation.objects.at_warehouse(warehouse)
        .filter(order_id=assignment.order_id, status=StockStatus.RESERVED)
        .order_by('asset_id')
        .values_list('asset_id', flat=True)
    )
    return RoutingResult(
        order_id=assignment.order_id,
        warehouse_id=warehouse.pk,
        warehouse_code=warehouse.code,
        estimated_delay_days=estimate_delay(warehouse.country, customer_country),
        assets_reserved=tuple(reserved),
        calculated_at=timezone.now(),
        created=False,
    )


class OrderRouter:
    """Routing methods."""

    @classmethod
    def assign_order(cls, order_id: str, customer_country: str, asset_ids) -> RoutingResult:
        """
        Assign an order to one warehouse and reserve its assets there.

        1. Refuse if fulfillment has started for the order
        2. Return the existing assignment if there is one
        3. Score warehouses, keep only those holding every asset
        4. Claim the order and flip each asset to RESERVED, all in one transaction

        Raises:
            RoutingRequestInvalidError: missing order, country or assets
            FulfillmentAlreadyStartedError: downstream picking has begun
            NoWarehouseAvailableError: no warehouse holds every asset
            StockConflictError: an asset was taken by another order meanwhile
            UpstreamServiceError: fulfillment status could not be read
        """
        wanted = unique_asset_ids(asset_ids or [])
        if not order_id or not customer_country or not wanted:
            raise RoutingRequestInvalidError()
        customer_country = customer_country.upper()

        if fetch_fulfillment_started(order_id):
            logger.warning("inventory.routing.refused", extra={"order_id": order_id})
            raise FulfillmentAlreadyStartedError(order_id)

        existing = AssignmentStore.get(order_id)
        if existing is not None:
            return _existing_result(existing, customer_country)

        scores = WarehouseScoring.score(wanted, customer_country)
        candidates = [s for s in scores if s.available_asset_count == len(wanted)]

        if not candidates:
            cls._fail(order_id, wanted, scores)

        best = candidates[0]

        with transaction.atomic():
            assignment, created = AssignmentStore.claim(order_id, best.warehouse_id)
            if not created:
                return _existing_result(assignment, customer_country)

            now = timezone.now()
            for asset_id in wanted:
                updated = (
                    StockLocation.objects.filter(
                        asset_id=asset_id,
                        warehouse_id=best.warehouse_id,
                        status=StockStatus.AVAILABLE,
                    )
                    .update(status=StockStatus.RESERVED, order_id=order_id, updated_at=now)
                )
                if updated != 1:
                    logger.warning(
                        "inventory.routing.stock_conflict",
                        extra={"order_id": order_id, "asset_id": asset_id,
                               "warehouse_code": best.warehouse_code},
                    )
                    raise StockConflictError(asset_id, best.warehouse_code, order_id=order_id)

                emit_on_commit(
                    asset_reserved_at_warehouse,
                    "inventory.asset.reserved_at_warehouse",
                    sender=StockLocation,
                    asset_id=asset_id,
                    warehouse_code=best.warehouse_code,
                    order_id=order_id,
                )

            emit_on_commit(
                warehouse_assigned,
                "inventory.order.warehouse_assigned",
                sender=RoutingAssignment,
                order_id=order_id,
                warehouse_id=best.warehouse_id,
                warehouse_code=best.warehouse_code,
                estimated_delay_days=best.estimated_delay_days,
                score=best.score,
            )

        return RoutingResult(
            order_id=order_id,
            warehouse_id=best.warehouse_id,
            warehouse_code=best.warehouse_code,
            estimated_delay_days=best.estimated_delay_days,
            assets_reserved=tuple(sorted(wanted)),
            calculated_at=assignment.assigned_at,
            created=True,
        )

    @classmethod
    def _fail(cls, order_id, wanted, scores):
        """Signal and raise: no warehouse holds the whole order."""
        best_partial = max(scores, key=lambda s: s.available_asset_count, default=None)
        best_available = best_partial.available_asset_count if best_partial else 0

        if best_partial is not None and best_available:
            held = set(
                StockLocation.objects.at_warehouse(best_partial.warehouse_id)
                .available()
                .for_assets(wanted)
                .values_list('asset_id', flat=True)
            )
            missing = [a for a in wanted if a not in held]
        else:
            missing = list(wanted)

        reason = f"no warehouse holds all {len(wanted)} assets (best: {best_available})"
        logger.warning(
            "inventory.routing.no_full_stock",
            extra={"order_id": order_id, "required": len(wanted), "best_available": best_available},
        )
        emit(
            routing_failed,
            "inventory.routing.failed",
            sender=RoutingAssignment,
            order_id=order_id,
            reason=reason,
            missing_asset_ids=missing,
        )
        raise NoWarehouseAvailableError(
            order_id,
            reason,
            required=len(wanted),
            best_available=best_available,
            missing_asset_ids=missing,
        )
