from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'admin/items', views.ItemViewSet, basename='admin-item')

urlpatterns = [
    # GET /api/items/ - Active catalog
    path('items/', views.active_items, name='item-list'),

    # Admin CRUD
    # GET    /api/admin/items/        - All items
    # POST   /api/admin/items/        - Create item
    # GET    /api/admin/items/{id}/   - Item detail
    # PATCH  /api/admin/items/{id}/   - Update item
    # DELETE /api/admin/items/{id}/   - Delete unused item
    path('', include(router.urls)),
]
