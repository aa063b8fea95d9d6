from django.contrib import admin
from django.utils.html import format_html
from .models import PointsLedgerEntry, Voucher, VoucherRedemption


@admin.register(Voucher)
class VoucherAdmin(admin.ModelAdmin):
    list_display = ['name', 'points_cost', 'is_active', 'redemption_count', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at', 'updated_at']

    def redemption_count(self, obj):
        return obj.redemptions.count()
    redemption_count.short_description = 'Redemptions'


@admin.register(VoucherRedemption)
class VoucherRedemptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'voucher', 'points_spent', 'status', 'created_at']
    list_filter = ['status', 'voucher', 'created_at']
    search_fields = ['user__email', 'user__public_id', 'voucher__name']
    date_hierarchy = 'created_at'
    readonly_fields = ['user', 'voucher', 'points_spent', 'status', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(PointsLedgerEntry)
class PointsLedgerEntryAdmin(admin.ModelAdmin):
    """Read-only view of the ledger. Adjustments go through the API."""

    list_display = ['user', 'change_display', 'source', 'reason', 'created_at']
    list_filter = ['source', 'created_at']
    search_fields = ['user__email', 'user__public_id', 'reason']
    date_hierarchy = 'created_at'

    def change_display(self, obj):
        colour = '#6B8E5E' if obj.change > 0 else '#B85C5C'
        return format_html('<span style="color: {};">{}</span>', colour, f'{obj.change:+d}')
    change_display.short_description = 'Change'
    change_display.admin_order_field = 'change'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
