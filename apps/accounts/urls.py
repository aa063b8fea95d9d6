from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'accounts'

router = DefaultRouter()
router.register(r'admin/users', views.AdminUserViewSet, basename='admin-user')

urlpatterns = [
    # Authentication
    path('auth/register/', views.register, name='register'),
    path('auth/login/', views.login, name='login'),

    # Own profile
    path('me/', views.me, name='me'),

    # Admin user management
    path('', include(router.urls)),
]
