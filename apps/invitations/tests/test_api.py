import time
from unittest.mock import patch
from uuid import uuid4

import pytest
from django.urls import reverse
from rest_framework import status


@pytest.fixture
def invitation_payload():
    return {
        'group_id': str(uuid4()),
        'group_name': 'Lisbon Trip',
        'email': 'dana@example.com',
        'inviter_name': 'Alice',
    }


@pytest.fixture
def issued_token(api_client, invitation_payload):
    response = api_client.post(reverse('invitations:invitation-create'), invitation_payload, format='json')
    return response.data['token']


class TestCreateInvitation:
    """Tests for POST /api/invitations/"""

    def test_create_invitation(self, api_client, invitation_payload):
        url = reverse('invitations:invitation-create')
        response = api_client.post(url, invitation_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['group_id'] == invitation_payload['group_id']
        assert response.data['email'] == 'dana@example.com'
        assert response.data['invited_by'] == 'Alice'
        assert response.data['invite_url'].endswith(response.data['token'])
        assert 'expires_at' in response.data

    def test_already_member(self, api_client, invitation_payload):
        url = reverse('invitations:invitation-create')
        data = {**invitation_payload, 'existing_member_emails': ['dana@example.com']}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'already a member' in response.data['error']

    def test_invalid_email(self, api_client, invitation_payload):
        url = reverse('invitations:invitation-create')
        data = {**invitation_payload, 'email': 'not-an-email'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data

    def test_missing_fields(self, api_client):
        url = reverse('invitations:invitation-create')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        for field in ('group_id', 'group_name', 'email', 'inviter_name'):
            assert field in response.data


class TestInvitationDetail:
    """Tests for GET /api/invitations/{token}/"""

    def test_resolve_invitation(self, api_client, issued_token, invitation_payload):
        url = reverse('invitations:invitation-detail', kwargs={'token': issued_token})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['group_id'] == invitation_payload['group_id']
        assert response.data['group_name'] == 'Lisbon Trip'
        assert response.data['email'] == 'dana@example.com'

    def test_expired_invitation(self, api_client, issued_token):
        url = reverse('invitations:invitation-detail', kwargs={'token': issued_token})
        with patch('django.core.signing.time.time', return_value=time.time() + 8 * 24 * 60 * 60):
            response = api_client.get(url)

        assert response.status_code == status.HTTP_410_GONE
        assert 'expired' in response.data['error']

    def test_invalid_invitation(self, api_client):
        url = reverse('invitations:invitation-detail', kwargs={'token': 'not-a-token'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Invalid invitation link'
