from django.urls import path
from . import views

app_name = 'invitations'

urlpatterns = [
    # POST /api/invitations/          - Issue an invitation
    path('', views.create_invitation, name='invitation-create'),

    # GET  /api/invitations/{token}/  - Resolve an invitation token
    path('<str:token>/', views.invitation_detail, name='invitation-detail'),
]
