"""
Invitations app services layer.

Services contain the business logic for issuing and resolving group
invitation tokens. They keep no state between calls.
"""

from .exceptions import (
    InvitationServiceError,
    AlreadyMemberError,
    InvalidInvitationError,
    InvitationExpiredError,
)

from .invite_management import (
    issue_invitation,
    resolve_invitation,
    build_invite_url,
)


__all__ = [
    # Exceptions
    'InvitationServiceError',
    'AlreadyMemberError',
    'InvalidInvitationError',
    'InvitationExpiredError',

    # Invite Management
    'issue_invitation',
    'resolve_invitation',
    'build_invite_url',
]
