"""
Domain-specific exceptions for invitations app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class InvitationServiceError(Exception):
    """Base exception for all invitations service errors."""
    pass


class AlreadyMemberError(InvitationServiceError):
    """Raised when the invited email already belongs to a group member."""
    pass


class InvalidInvitationError(InvitationServiceError):
    """Raised when an invitation token is malformed or was tampered with."""
    pass


class InvitationExpiredError(InvitationServiceError):
    """Raised when an invitation token is older than its lifetime."""
    pass
