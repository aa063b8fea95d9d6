from django.contrib import admin
from django.utils.html import format_html
from .models import RecyclableItem


@admin.register(RecyclableItem)
class RecyclableItemAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'measurement_type', 'icon_preview', 'is_active', 'updated_at']
    list_filter = ['measurement_type', 'is_active']
    search_fields = ['name']
    readonly_fields = ['name_normalized', 'created_at', 'updated_at']
    ordering = ['id']

    def icon_preview(self, obj):
        if not obj.icon_url:
            return '-'
        return format_html('<img src="{}" style="height: 24px;" />', obj.icon_url)
    icon_preview.short_description = 'Icon'

    actions = ['deactivate_items']

    @admin.action(description='Deactivate selected items')
    def deactivate_items(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} item(s).')
