from django.contrib import admin
from .models import RecyclingSession, RecyclingTransaction


class RecyclingTransactionInline(admin.TabularInline):
    model = RecyclingTransaction
    extra = 0
    fields = ['item', 'quantity', 'created_at']
    readonly_fields = ['created_at']


@admin.register(RecyclingSession)
class RecyclingSessionAdmin(admin.ModelAdmin):
    list_display = ['id', 'recycler', 'collection_centre', 'transaction_count', 'created_at']
    list_filter = ['collection_centre', 'created_at']
    search_fields = ['recycler__public_id', 'recycler__email', 'collection_centre__full_name']
    date_hierarchy = 'created_at'
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['recycler', 'collection_centre']
    inlines = [RecyclingTransactionInline]

    def transaction_count(self, obj):
        return obj.transactions.count()
    transaction_count.short_description = 'Items'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('recycler', 'collection_centre')


@admin.register(RecyclingTransaction)
class RecyclingTransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'item', 'quantity', 'recycler', 'collection_centre', 'created_at']
    list_filter = ['item', 'created_at']
    search_fields = ['recycler__public_id', 'recycler__email']
    date_hierarchy = 'created_at'
    readonly_fields = ['created_at']
    raw_id_fields = ['session', 'recycler', 'collection_centre']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('item', 'recycler', 'collection_centre')
