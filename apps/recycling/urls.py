from django.urls import path
from . import views

app_name = 'recycling'

urlpatterns = [
    path('staff/create-session/', views.create_session, name='create-session'),
    path('staff/transactions/', views.centre_transactions, name='transaction-list'),
    path('staff/transactions/<uuid:session_id>/', views.session_detail, name='session-detail'),
    path('staff/lookup-recycler/', views.lookup_recycler, name='lookup-recycler'),
]
