"""
Invite management service.

Issues and resolves group invitation tokens. Tokens are signed and
timestamped with Django's signing framework, so nothing is stored: the
token itself carries the invitation and its age.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable
from uuid import UUID

from django.conf import settings
from django.core import signing
from django.utils import timezone

from .exceptions import (
    AlreadyMemberError,
    InvalidInvitationError,
    InvitationExpiredError,
)


logger = logging.getLogger(__name__)

INVITATION_SALT = 'invitations'


def _max_age() -> timedelta:
    return timedelta(days=getattr(settings, 'INVITATION_MAX_AGE_DAYS', 7))


def _signer() -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=INVITATION_SALT)


def build_invite_url(token: str) -> str:
    base_url = getattr(settings, 'INVITATION_BASE_URL', 'http://localhost:8000').rstrip('/')
    return f"{base_url}/invite/{token}"


def issue_invitation(
    *,
    group_id: UUID,
    group_name: str,
    email: str,
    inviter_name: str,
    existing_member_emails: Iterable[str] = ()
) -> dict:
    """
    Issue an invitation to join a group.

    Args:
        group_id: ID of the group
        group_name: Group name shown on the invitation
        email: Invitee's email address
        inviter_name: Display name of the member sending the invitation
        existing_member_emails: Emails of the group's current members

    Returns:
        Dict with token, invite_url, group_id, group_name, email,
        invited_by, issued_at and expires_at

    Raises:
        AlreadyMemberError: If email already belongs to a group member
    """
    email = email.strip().lower()
    members = {member_email.strip().lower() for member_email in existing_member_emails}
    if email in members:
        raise AlreadyMemberError(f"{email} is already a member of {group_name}")

    issued_at = timezone.now()
    payload = {
        'group_id': str(group_id),
        'group_name': group_name,
        'email': email,
        'invited_by': inviter_name,
        'issued_at': issued_at.isoformat(),
    }
    token = _signer().sign_object(payload)

    logger.info("Issued invitation to group %s for %s", group_id, email)

    return {
        **payload,
        'token': token,
        'invite_url': build_invite_url(token),
        'issued_at': issued_at,
        'expires_at': issued_at + _max_age(),
    }


def resolve_invitation(*, token: str) -> dict:
    """
    Resolve an invitation token back into the invitation it carries.

    Args:
        token: Token from the invitation link

    Returns:
        Dict with group_id, group_name, email, invited_by, issued_at and
        expires_at

    Raises:
        InvitationExpiredError: If the token is older than
            INVITATION_MAX_AGE_DAYS
        InvalidInvitationError: If the token is malformed or tampered with
    """
    try:
        payload = _signer().unsign_object(token, max_age=_max_age())
    except signing.SignatureExpired:
        logger.warning("Rejected expired invitation token")
        raise InvitationExpiredError("This invitation has expired")
    except signing.BadSignature:
        logger.warning("Rejected invalid invitation token")
        raise InvalidInvitationError("Invalid invitation link")

    try:
        issued_at = datetime.fromisoformat(payload['issued_at'])
        invitation = {
            'group_id': payload['group_id'],
            'group_name': payload['group_name'],
            'email': payload['email'],
            'invited_by': payload['invited_by'],
        }
    except (KeyError, TypeError, ValueError):
        raise InvalidInvitationError("Invalid invitation link")

    invitation['issued_at'] = issued_at
    invitation['expires_at'] = issued_at + _max_age()
    return invitation
