"""
Expense Services Module
=======================

Splits an expense across the members who shared it, with cent precision.

Classes:
    ExpenseSplitService: Equal splitting with exact remainder distribution.

Example:
    Splitting a dinner between three people::

        from decimal import Decimal
        from apps.expenses.services import ExpenseSplitService

        splits = ExpenseSplitService.distribute_amount(
            Decimal('100.00'),
            ['alice', 'bob', 'carol'],
        )
        # [('alice', Decimal('33.34')), ('bob', Decimal('33.33')),
        #  ('carol', Decimal('33.33'))]
"""

import logging
from decimal import Decimal, InvalidOperation

from .exceptions import (
    DuplicateParticipantError,
    InvalidAmountError,
    NoParticipantsError,
)


logger = logging.getLogger(__name__)


class ExpenseSplitService:
    """
    Service for splitting expenses between group members.

    Amounts are converted to cents, divided with integer arithmetic and the
    remainder is handed out one cent at a time, so splits always sum exactly
    to the expense amount.
    """

    @staticmethod
    def distribute_amount(amount, member_ids):
        """
        Split an amount equally with cent precision (no rounding errors).

        Algorithm:
            1. Convert to cents: ``total_cents = amount * 100``
            2. Base share: ``base = total_cents // N``
            3. Remainder: ``remainder = total_cents % N``
            4. First 'remainder' members get ``(base + 1)`` cents
            5. Rest get 'base' cents
            6. Convert back: ``share = cents / 100``

        Args:
            amount (Decimal): The expense amount, positive, at most two
                decimal places.
            member_ids (list): Ids of the members sharing the expense. Order
                decides who receives the extra cents.

        Returns:
            list[tuple]: ``(member_id, Decimal)`` pairs in input order.

        Raises:
            NoParticipantsError: If ``member_ids`` is empty.
            DuplicateParticipantError: If a member id is listed twice.
            InvalidAmountError: If the amount is not positive or has
                fractions of a cent.
        """
        member_ids = list(member_ids)
        if not member_ids:
            raise NoParticipantsError("At least one participant required")
        if len(set(member_ids)) != len(member_ids):
            raise DuplicateParticipantError("Each participant can only be listed once")

        try:
            amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except InvalidOperation:
            raise InvalidAmountError(f"Invalid amount: {amount!r}")
        if not amount.is_finite() or amount <= 0:
            raise InvalidAmountError("Amount must be positive")

        total_cents = amount * 100
        if total_cents != total_cents.to_integral_value():
            raise InvalidAmountError("Amount cannot contain fractions of a cent")
        total_cents = int(total_cents)

        base_cents, remainder_cents = divmod(total_cents, len(member_ids))

        splits = []
        for i, member_id in enumerate(member_ids):
            member_cents = base_cents + 1 if i < remainder_cents else base_cents
            splits.append((member_id, Decimal(member_cents).scaleb(-2)))

        # Safety check
        total_check = sum((share for _, share in splits), Decimal('0'))
        if total_check != amount:
            raise InvalidAmountError(f"Split calculation error: {total_check} != {amount}")

        logger.debug("Split %s between %d participants", amount, len(member_ids))
        return splits
