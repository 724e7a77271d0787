from django.urls import path
from . import views

app_name = 'settlements'

urlpatterns = [
    # POST /api/settlements/plan/   - Compute settlement transfers
    path('plan/', views.plan_settlements, name='plan'),

    # POST /api/settlements/apply/  - Apply recorded payments to balances
    path('apply/', views.apply_transfers, name='apply'),
]
