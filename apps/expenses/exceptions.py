"""Domain-specific exceptions for expenses services."""


class ExpenseServiceError(Exception):
    """Base exception for expenses services."""
    pass


class NoParticipantsError(ExpenseServiceError):
    """Raised when an expense has nobody to split it between."""
    pass


class DuplicateParticipantError(ExpenseServiceError):
    """Raised when the same member is listed twice in one split."""
    pass


class InvalidAmountError(ExpenseServiceError):
    """Raised when an expense amount can't be split into cents."""
    pass
