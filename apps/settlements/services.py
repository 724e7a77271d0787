"""
Settlement Services Module
==========================

Business logic around the settlement engine: validating that a group's
balances can be settled, producing settlement plans with per-member totals,
and applying recorded payments back onto balances.

Classes:
    SettlementService: Static methods wrapping ``minimize_settlements``.

Example:
    Planning a group's settlements::

        from apps.settlements.services import SettlementService

        summary = SettlementService.get_settlement_summary(members)
        for transfer in summary['transfers']:
            print(f"{transfer.from_name} pays {transfer.to_name} {transfer.amount}")

Note:
    Every method is a pure function of its arguments. Nothing is read from
    or written to the database.
"""

import logging
from decimal import Decimal

from django.conf import settings

from .engine import (
    CENT,
    MemberBalance,
    SettlementTransfer,
    minimize_settlements,
    to_decimal,
)
from .exceptions import (
    DuplicateMemberError,
    InvalidTransferError,
    UnbalancedBalancesError,
    UnknownMemberError,
)


logger = logging.getLogger(__name__)


def _default_tolerance():
    return to_decimal(getattr(settings, 'SETTLEMENT_BALANCE_TOLERANCE', '0.01'))


def _default_require_balanced():
    return getattr(settings, 'SETTLEMENT_REQUIRE_BALANCED', True)


def _transfer_fields(transfer):
    """Return ``(from_id, to_id, amount)`` for a SettlementTransfer or a dict."""
    if isinstance(transfer, SettlementTransfer):
        return transfer.from_id, transfer.to_id, transfer.amount
    return transfer['from'], transfer['to'], to_decimal(transfer['amount'])


class SettlementService:
    """
    Service for settling debts inside a group.

    Methods:
        check_balanced: Verify that balances sum to zero and ids are unique.
        plan_settlements: Validate and run the settlement engine.
        get_settlement_summary: Plan plus per-member paid/received totals.
        apply_transfers: Apply recorded payments to balances.
    """

    @staticmethod
    def check_balanced(members, tolerance=None):
        """
        Verify that member balances can be fully settled.

        Args:
            members (list[MemberBalance]): Balances of one group.
            tolerance (Decimal, optional): Largest accepted absolute sum of
                all balances. Defaults to ``SETTLEMENT_BALANCE_TOLERANCE``.

        Returns:
            Decimal: The sum of all balances (the imbalance).

        Raises:
            DuplicateMemberError: If a member id appears twice.
            UnbalancedBalancesError: If the balances don't sum to zero
                within tolerance.
        """
        members = list(members)
        tolerance = _default_tolerance() if tolerance is None else to_decimal(tolerance)

        seen = set()
        for member in members:
            if member.id in seen:
                raise DuplicateMemberError(f"Member {member.id} appears more than once")
            seen.add(member.id)

        imbalance = sum((member.balance for member in members), Decimal('0'))
        if abs(imbalance) > tolerance:
            logger.warning(
                "Rejected unbalanced balances for %d members (sum %s)",
                len(members), imbalance,
            )
            raise UnbalancedBalancesError(
                f"Balances must sum to zero, got {imbalance.quantize(CENT)}",
                imbalance=imbalance,
            )
        return imbalance

    @staticmethod
    def plan_settlements(members, require_balanced=None):
        """
        Compute the transfers that settle a group.

        Args:
            members (list[MemberBalance]): Balances of one group.
            require_balanced (bool, optional): Reject input whose balances
                don't sum to zero. Defaults to ``SETTLEMENT_REQUIRE_BALANCED``.

        Returns:
            list[SettlementTransfer]: Transfers in matching order.

        Raises:
            DuplicateMemberError: If a member id appears twice.
            UnbalancedBalancesError: If ``require_balanced`` and the
                balances don't sum to zero.
        """
        members = list(members)
        if require_balanced is None:
            require_balanced = _default_require_balanced()
        if require_balanced:
            SettlementService.check_balanced(members)

        transfers = minimize_settlements(members)

        logger.info(
            "Planned %d settlement transfer(s) for %d members",
            len(transfers), len(members),
        )
        for transfer in transfers:
            logger.debug(
                "Transfer %s -> %s: %s",
                transfer.from_id, transfer.to_id, transfer.amount,
            )
        return transfers

    @staticmethod
    def get_settlement_summary(members, require_balanced=None):
        """
        Plan settlements and report what each member pays and receives.

        Returns:
            dict: A dictionary containing:
                - transfers (list[SettlementTransfer]): The plan.
                - transfer_count (int): Number of transfers.
                - total_amount (Decimal): Sum of all transfer amounts.
                - is_settled (bool): True when no transfer is needed.
                - members (list[dict]): Per member ``id``, ``name``,
                  ``balance``, ``pays`` and ``receives``, in input order.

        Raises:
            DuplicateMemberError: If a member id appears twice.
            UnbalancedBalancesError: If balances are rejected as unbalanced.
        """
        members = list(members)
        transfers = SettlementService.plan_settlements(members, require_balanced=require_balanced)

        pays = {member.id: Decimal('0.00') for member in members}
        receives = {member.id: Decimal('0.00') for member in members}
        for transfer in transfers:
            pays[transfer.from_id] += transfer.amount
            receives[transfer.to_id] += transfer.amount

        return {
            'transfers': transfers,
            'transfer_count': len(transfers),
            'total_amount': sum((t.amount for t in transfers), Decimal('0.00')),
            'is_settled': not transfers,
            'members': [
                {
                    'id': member.id,
                    'name': member.name,
                    'balance': member.balance,
                    'pays': pays[member.id],
                    'receives': receives[member.id],
                }
                for member in members
            ],
        }

    @staticmethod
    def apply_transfers(members, transfers):
        """
        Apply recorded payments to member balances.

        A payment of X from A to B raises A's balance by X and lowers B's
        by X, moving both towards zero when A owed B.

        Args:
            members (list[MemberBalance]): Balances before the payments.
            transfers (list): ``SettlementTransfer`` objects or dicts with
                ``from``, ``to`` and ``amount`` keys.

        Returns:
            list[MemberBalance]: New balances, in input order.

        Raises:
            UnknownMemberError: If a transfer references an unknown member.
            InvalidTransferError: If an amount is not positive or a member
                pays themselves.
        """
        members = list(members)
        balances = {member.id: member.balance for member in members}

        for transfer in transfers:
            from_id, to_id, amount = _transfer_fields(transfer)
            for member_id in (from_id, to_id):
                if member_id not in balances:
                    raise UnknownMemberError(f"Member {member_id} is not part of this group")
            if from_id == to_id:
                raise InvalidTransferError(f"Member {from_id} cannot pay themselves")
            if amount <= 0:
                raise InvalidTransferError(f"Transfer amount must be positive, got {amount}")

            balances[from_id] += amount
            balances[to_id] -= amount

        return [
            MemberBalance(id=member.id, name=member.name, balance=balances[member.id])
            for member in members
        ]
