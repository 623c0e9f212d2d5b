"""
Assetman Admin.

Provides read-only views for production debugging:
- Warehouse / Location: list + edit
- Movement: read-only audit trail
- Reservation: read-only with "release" action
- StockLocation / RoutingAssignment: read-only, change only through routing
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from assetman.exceptions import AssetmanError
from assetman.models import Location, Movement, Reservation, RoutingAssignment, StockLocation, Warehouse

logger = logging.getLogger(__name__)


class ReadOnlyAdminMixin:
    """Rows change only through the inventory service."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# WAREHOUSE / LOCATION ADMIN
# =========================================================================

class LocationInline(admin.TabularInline):
    model = Location
    extra = 0
    fields = ['code', 'kind']


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    """Warehouse admin — editable."""

    list_display = ['code', 'name', 'country', 'active', 'created_at']
    list_filter = ['active', 'country']
    search_fields = ['code', 'name']
    readonly_fields = ['created_at']
    inlines = [LocationInline]


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['code', 'warehouse', 'kind', 'created_at']
    list_filter = ['kind', 'warehouse']
    search_fields = ['code', 'warehouse__code']
    readonly_fields = ['created_at']


# =========================================================================
# MOVEMENT ADMIN (read-only audit trail)
# =========================================================================

@admin.register(Movement)
class MovementAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Movement admin — read-only. Immutable audit trail."""

    list_display = ['id', 'asset_id', 'from_location', 'to_location', 'reason', 'created_at']
    list_filter = ['reason', 'created_at']
    search_fields = ['asset_id']
    readonly_fields = ['asset_id', 'from_location', 'to_location', 'reason', 'created_at']
    date_hierarchy = 'created_at'
    list_select_related = ['from_location', 'to_location']


# =========================================================================
# RESERVATION ADMIN (read-only with release action)
# =========================================================================

@admin.register(Reservation)
class ReservationAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Reservation admin — read-only with release action."""

    list_display = ['asset_id', 'order_ref', 'created_at']
    search_fields = ['asset_id', 'order_ref']
    readonly_fields = ['asset_id', 'order_ref', 'created_at']
    actions = ['release_reservations']

    @admin.action(description=_('Release selected reservations'))
    def release_reservations(self, request, queryset):
        from assetman import inventory

        count = 0
        for asset_id in queryset.values_list('asset_id', flat=True):
            try:
                inventory.release_reservation(asset_id)
                count += 1
            except AssetmanError as exc:
                logger.warning("release_reservations: failed to release %s: %s", asset_id, exc)

        self.message_user(request, _('{count} reservation(s) released.').format(count=count))


# =========================================================================
# ROUTING ADMIN (read-only)
# =========================================================================

@admin.register(StockLocation)
class StockLocationAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['asset_id', 'warehouse', 'status', 'order_id', 'updated_at']
    list_filter = ['status', 'warehouse']
    search_fields = ['asset_id', 'order_id']
    readonly_fields = ['asset_id', 'warehouse', 'status', 'order_id', 'created_at', 'updated_at']


@admin.register(RoutingAssignment)
class RoutingAssignmentAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['order_id', 'warehouse', 'assigned_at']
    list_filter = ['warehouse']
    search_fields = ['order_id']
    readonly_fields = ['order_id', 'warehouse', 'assigned_at']
    date_hierarchy = 'assigned_at'
