"""
Warehouse scoring — rank active warehouses for a set of assets.

Pure given a stock snapshot and the static delay table: the same
inputs always produce the same ranking. Ties on score are broken by
warehouse code, ascending.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from django.db.models import Count

from assetman.conf import assetman_settings
from assetman.models.stock import StockLocation
from assetman.models.warehouse import Warehouse


@dataclass(frozen=True)
class WarehouseScore:
    warehouse_id: int
    warehouse_code: str
    country: str
    score: int
    available_asset_count: int
    estimated_delay_days: int
    reasons: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_full_stock(self) -> bool:
        return 'full_stock' in self.reasons

    def as_dict(self) -> dict:
        return {
            'warehouse_id': self.warehouse_id,
            'warehouse_code': self.warehouse_code,
            'country': self.country,
            'score': self.score,
            'available_asset_count': self.available_asset_count,
            'estimated_delay_days': self.estimated_delay_days,
            'reasons': list(self.reasons),
        }


def unique_asset_ids(asset_ids: Iterable[str]) -> list[str]:
    """Drop duplicates and blanks, keep first-seen order."""
    seen = {}
    for asset_id in asset_ids:
        if asset_id:
            seen.setdefault(asset_id, None)
    return list(seen)


def country_delay(country: str) -> int:
    delays = assetman_settings.DELIVERY_DELAYS
    return delays.get((country or '').upper(), assetman_settings.DEFAULT_DELIVERY_DELAY)


def estimate_delay(warehouse_country: str, customer_country: str) -> int:
    """
    Delivery delay in days.

    Same country: the flat per-country constant.
    Cross-border: the slower of the two countries, plus one day.
    """
    warehouse_country = (warehouse_country or '').upper()
    customer_country = (customer_country or '').upper()
    if warehouse_country == customer_country:
        return country_delay(customer_country)
    return max(country_delay(warehouse_country), country_delay(customer_country)) + 1


def score_warehouse(warehouse, available_count: int, required: int,
                    customer_country: str) -> WarehouseScore:
    """Score one warehouse. No I/O."""
    weights = assetman_settings.ROUTING_WEIGHTS
    delay = estimate_delay(warehouse.country, customer_country)

    score = 0
    reasons = []
    if warehouse.country.upper() == (customer_country or '').upper():
        score += weights['SAME_COUNTRY']
        reasons.append('same_country')
    if available_count == required:
        score += weights['FULL_STOCK']
        reasons.append('full_stock')
    if delay <= assetman_settings.SHORT_DELAY_THRESHOLD_DAYS:
        score += weights['SHORT_DELAY']
        reasons.append('short_delay')

    return WarehouseScore(
        warehouse_id=warehouse.pk,
        warehouse_code=warehouse.code,
        country=warehouse.country,
        score=score,
        available_asset_count=available_count,
        estimated_delay_days=delay,
        reasons=tuple(reasons),
    )


def rank(scores: Iterable[WarehouseScore]) -> list[WarehouseScore]:
    return sorted(scores, key=lambda s: (-s.score, s.warehouse_code))


class WarehouseScoring:
    """Scoring against the current stock snapshot."""

    @classmethod
    def available_counts(cls, asset_ids: list[str]) -> dict[int, int]:
        """warehouse_id -> number of the given assets AVAILABLE there."""
        rows = (
            StockLocation.objects.available().for_assets(asset_ids)
            .values('warehouse_id')
            .annotate(n=Count('asset_id', distinct=True))
            .order_by()
        )
        return {row['warehouse_id']: row['n'] for row in rows}

    @classmethod
    def score(cls, asset_ids: Iterable[str], customer_country: str) -> list[WarehouseScore]:
        """
        Score every active warehouse, best first.

        Duplicate asset ids count once. An inactive warehouse is never
        scored, whatever its stock.
        """
        wanted = unique_asset_ids(asset_ids)
        counts = cls.available_counts(wanted) if wanted else {}
        warehouses = Warehouse.objects.filter(active=True).order_by('code')

        return rank(
            score_warehouse(wh, counts.get(wh.pk, 0), len(wanted), customer_country)
            for wh in warehouses
        )
