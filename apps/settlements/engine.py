"""
Settlement Engine
=================

Computes the transfers that settle a group's debts from the members' signed
net balances.

Creditors (positive balance, owed money) and debtors (negative balance, owe
money) are kept in two max-priority-queues. The largest creditor is
repeatedly matched against the largest debtor, one transfer is emitted per
match, and a party with a remainder goes back into its queue until one of the
queues runs dry.

All arithmetic is done in integer cents: each balance is rounded half-up to
cents on entry, so the 0.01 tolerance and the rounding of every transfer are
exact integer operations.

Example:
    Settling a three-member group::

        from decimal import Decimal
        from apps.settlements.engine import MemberBalance, minimize_settlements

        transfers = minimize_settlements([
            MemberBalance('a', 'Alice', Decimal('30.00')),
            MemberBalance('b', 'Bob', Decimal('-10.00')),
            MemberBalance('c', 'Carol', Decimal('-20.00')),
        ])
        for transfer in transfers:
            print(f"{transfer.from_name} -> {transfer.to_name}: {transfer.amount}")
        # Carol -> Alice: 20.00
        # Bob -> Alice: 10.00

Note:
    The greedy largest-vs-largest strategy is a heuristic. It does not
    guarantee the globally minimal number of transfers, which is NP-hard in
    general.
"""

import heapq
import itertools
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Hashable, Iterable, List, Tuple


CENT = Decimal('0.01')

# Balances whose magnitude is at or below one cent count as settled.
EPSILON = CENT
EPSILON_CENTS = 1


def to_decimal(value) -> Decimal:
    """Coerce ints, strings and floats to Decimal (floats via their repr)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_minor_units(value) -> int:
    """Convert a currency amount to integer cents, rounding half-up."""
    quantized = to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(quantized.scaleb(2))


def from_minor_units(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal."""
    return Decimal(cents).scaleb(-2)


@dataclass(frozen=True)
class MemberBalance:
    """Net balance of one group member. Positive means the member is owed money."""

    id: Hashable
    name: str
    balance: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'balance', to_decimal(self.balance))

    @classmethod
    def from_dict(cls, data: dict) -> 'MemberBalance':
        return cls(id=data['id'], name=data.get('name', ''), balance=data['balance'])

    @property
    def is_settled(self) -> bool:
        return abs(self.balance) <= EPSILON


@dataclass(frozen=True)
class SettlementTransfer:
    """A suggested payment of ``amount`` from ``from_id`` to ``to_id``."""

    from_id: Hashable
    to_id: Hashable
    amount: Decimal
    from_name: str
    to_name: str

    def as_dict(self) -> dict:
        return {
            'from': self.from_id,
            'to': self.to_id,
            'amount': self.amount,
            'from_name': self.from_name,
            'to_name': self.to_name,
        }


class BalanceQueue:
    """
    Max-priority-queue of ``(magnitude, member index)`` pairs.

    Backed by ``heapq`` (a min-heap), so magnitudes are stored negated.
    A monotonically increasing sequence number breaks ties, which makes
    entries of equal magnitude come out in insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, int]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, magnitude: int, index: int) -> None:
        heapq.heappush(self._heap, (-magnitude, next(self._sequence), index))

    def pop(self) -> Tuple[int, int]:
        """Remove and return the entry with the largest magnitude."""
        negated, _, index = heapq.heappop(self._heap)
        return -negated, index


def _partition(members: List[MemberBalance]) -> Tuple[BalanceQueue, BalanceQueue]:
    creditors = BalanceQueue()
    debtors = BalanceQueue()

    for index, member in enumerate(members):
        balance = to_decimal(member.balance)
        # Tolerance applies to the unrounded balance
        if abs(balance) <= EPSILON:
            continue
        cents = max(abs(to_minor_units(balance)), EPSILON_CENTS)
        if balance > 0:
            creditors.push(cents, index)
        else:
            # Debts are queued by magnitude
            debtors.push(cents, index)

    return creditors, debtors


def minimize_settlements(members: Iterable[Any]) -> List[SettlementTransfer]:
    """
    Compute the settlement transfers for one group's member balances.

    Args:
        members: Member balances of a single group. Each item is a
            ``MemberBalance`` or anything with ``id``, ``name`` and
            ``balance`` attributes.

    Returns:
        list[SettlementTransfer]: Transfers in the order they were matched,
        largest amounts first. Empty when everybody is within one cent of
        zero.

    Note:
        Balances are expected to sum to zero. If they don't, matching stops
        as soon as either side runs out, and whatever is left over on the
        other side is not settled. Use
        ``SettlementService.check_balanced`` to reject such input.
    """
    members = list(members)
    creditors, debtors = _partition(members)

    transfers: List[SettlementTransfer] = []
    while creditors and debtors:
        credit, creditor_index = creditors.pop()
        debt, debtor_index = debtors.pop()

        creditor = members[creditor_index]
        debtor = members[debtor_index]
        amount = min(credit, debt)

        transfers.append(SettlementTransfer(
            from_id=debtor.id,
            to_id=creditor.id,
            amount=from_minor_units(amount),
            from_name=debtor.name,
            to_name=creditor.name,
        ))

        credit -= amount
        debt -= amount
        if credit > EPSILON_CENTS:
            creditors.push(credit, creditor_index)
        if debt > EPSILON_CENTS:
            debtors.push(debt, debtor_index)

    return transfers
