from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'rewards'

router = DefaultRouter()
router.register(r'admin/vouchers', views.VoucherViewSet, basename='admin-voucher')

urlpatterns = [
    # Recycler facing
    path('vouchers/', views.vouchers, name='voucher-list'),
    path('vouchers/redeem/', views.redeem, name='redeem'),
    path('points/me/', views.my_points, name='my-points'),
    path('redemptions/me/', views.my_redemptions, name='my-redemptions'),

    # Admin
    path('admin/points/adjust/', views.adjust_points, name='adjust-points'),
    path('', include(router.urls)),
]
