from django.urls import path
from . import views

app_name = 'expenses'

urlpatterns = [
    # POST /api/expenses/split/  - Split an amount between members
    path('split/', views.split_expense, name='split'),
]
