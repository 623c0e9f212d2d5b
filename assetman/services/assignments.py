"""
Assignment store — the single, final warehouse decision per order.
"""

from django.db import IntegrityError, transaction

from assetman.models.stock import RoutingAssignment


class AssignmentStore:

    @classmethod
    def get(cls, order_id: str) -> RoutingAssignment | None:
        return (
            RoutingAssignment.objects.select_related('warehouse')
            .filter(order_id=order_id)
            .first()
        )

    @classmethod
    def claim(cls, order_id: str, warehouse_id: int) -> tuple[RoutingAssignment, bool]:
        """
        Write the assignment unless another caller already did.

        Returns (assignment, created). When a concurrent request won the
        race, its assignment is returned with created=False.
        """
        try:
            with transaction.atomic():
                assignment = RoutingAssignment.objects.create(
                    order_id=order_id,
                    warehouse_id=warehouse_id,
                )
            return assignment, True
        except IntegrityError:
            return cls.get(order_id), False
