from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, Role


ROLE_COLOURS = {
    Role.ADMIN: '#B85C5C',
    Role.CENTRE_STAFF: '#A47449',
    Role.RECYCLER: '#6B8E5E',
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for profiles.

    Lists recyclers, centre staff and admins with their member codes and
    allows role changes in bulk.
    """

    list_display = [
        'email',
        'full_name',
        'public_id',
        'role_badge',
        'is_active_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'full_name',
        'public_id',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'full_name', 'public_id', 'password')
        }),
        ('Role', {
            'fields': ('role',)
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Profile', {
            'classes': ('wide',),
            'fields': ('email', 'full_name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'public_id',
        'created_at',
        'updated_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display role as coloured badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            ROLE_COLOURS.get(obj.role, '#999'),
            obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    def is_active_badge(self, obj):
        if obj.is_active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Inactive</span>'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = [
        'make_recycler',
        'make_centre_staff',
        'deactivate_users',
    ]

    @admin.action(description='Set role: recycler')
    def make_recycler(self, request, queryset):
        count = queryset.update(role=Role.RECYCLER)
        self.message_user(request, f'{count} profile(s) set to recycler.')

    @admin.action(description='Set role: centre staff')
    def make_centre_staff(self, request, queryset):
        count = queryset.update(role=Role.CENTRE_STAFF)
        self.message_user(request, f'{count} profile(s) set to centre staff.')

    @admin.action(description='Deactivate selected profiles')
    def deactivate_users(self, request, queryset):
        """Deactivate selected profiles (superusers are skipped)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} profile(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
