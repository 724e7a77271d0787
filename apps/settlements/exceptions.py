"""
Domain exceptions for settlements app.

These exceptions are raised by the settlements services layer when the
member balances handed to it can't be settled as requested. Views catch
them and convert them to HTTP responses.

Exception Hierarchy:
    SettlementServiceError (base)
    ├── UnbalancedBalancesError
    ├── DuplicateMemberError
    ├── UnknownMemberError
    └── InvalidTransferError
"""


class SettlementServiceError(Exception):
    """
    Base exception for all settlements service errors.

    Catch this in views to handle any settlement error:

        try:
            summary = SettlementService.get_settlement_summary(members)
        except SettlementServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class UnbalancedBalancesError(SettlementServiceError):
    """
    Raised when member balances don't sum to zero within tolerance.

    Settling such balances would leave part of the debt unpaid.
    """

    def __init__(self, message, imbalance=None):
        super().__init__(message)
        self.imbalance = imbalance


class DuplicateMemberError(SettlementServiceError):
    """Raised when the same member id appears more than once."""
    pass


class UnknownMemberError(SettlementServiceError):
    """Raised when a transfer references a member that isn't in the group."""
    pass


class InvalidTransferError(SettlementServiceError):
    """Raised when a recorded transfer has a non-positive amount or pays itself."""
    pass
