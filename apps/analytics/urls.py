from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # GET /api/admin/analytics/?range=7d|30d|all
    path('admin/analytics/', views.transaction_overview, name='transaction-overview'),

    # GET /api/admin/stats/
    path('admin/stats/', views.dashboard_stats, name='dashboard-stats'),
]
