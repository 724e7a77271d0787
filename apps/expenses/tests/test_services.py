"""
Service layer unit tests for expenses app.

Tests cover:
- Cent-precise equal splitting
- Remainder distribution order
- Input validation errors
"""

from decimal import Decimal

import pytest

from apps.expenses.exceptions import (
    DuplicateParticipantError,
    ExpenseServiceError,
    InvalidAmountError,
    NoParticipantsError,
)
from apps.expenses.services import ExpenseSplitService


class TestDistributeAmount:
    """Tests for ExpenseSplitService.distribute_amount."""

    def test_even_split(self):
        splits = ExpenseSplitService.distribute_amount(Decimal('90.00'), ['a', 'b', 'c'])

        assert splits == [
            ('a', Decimal('30.00')),
            ('b', Decimal('30.00')),
            ('c', Decimal('30.00')),
        ]

    def test_remainder_goes_to_first_members(self):
        splits = ExpenseSplitService.distribute_amount(Decimal('100.00'), ['a', 'b', 'c'])

        assert [amount for _, amount in splits] == [
            Decimal('33.34'), Decimal('33.33'), Decimal('33.33'),
        ]

    def test_sum_is_exact(self):
        amount = Decimal('1234.57')
        splits = ExpenseSplitService.distribute_amount(amount, [f'm{i}' for i in range(7)])

        assert sum(share for _, share in splits) == amount
        shares = {share for _, share in splits}
        assert max(shares) - min(shares) <= Decimal('0.01')

    def test_single_member_pays_everything(self):
        assert ExpenseSplitService.distribute_amount(Decimal('12.34'), ['a']) == [
            ('a', Decimal('12.34')),
        ]

    def test_one_cent_between_many(self):
        splits = ExpenseSplitService.distribute_amount(Decimal('0.01'), ['a', 'b', 'c'])

        assert [amount for _, amount in splits] == [
            Decimal('0.01'), Decimal('0.00'), Decimal('0.00'),
        ]

    def test_string_and_int_amounts(self):
        assert ExpenseSplitService.distribute_amount('10', ['a', 'b'])[0][1] == Decimal('5.00')
        assert ExpenseSplitService.distribute_amount(10, ['a', 'b'])[1][1] == Decimal('5.00')

    def test_no_participants(self):
        with pytest.raises(NoParticipantsError):
            ExpenseSplitService.distribute_amount(Decimal('10.00'), [])

    def test_duplicate_participants(self):
        with pytest.raises(DuplicateParticipantError):
            ExpenseSplitService.distribute_amount(Decimal('10.00'), ['a', 'a'])

    @pytest.mark.parametrize('amount', [Decimal('0'), Decimal('-5.00'), 'abc', Decimal('NaN')])
    def test_invalid_amount(self, amount):
        with pytest.raises(InvalidAmountError):
            ExpenseSplitService.distribute_amount(amount, ['a', 'b'])

    def test_fraction_of_a_cent(self):
        with pytest.raises(InvalidAmountError, match='fractions of a cent'):
            ExpenseSplitService.distribute_amount(Decimal('10.005'), ['a', 'b'])

    def test_errors_share_base_class(self):
        for error in (NoParticipantsError, DuplicateParticipantError, InvalidAmountError):
            assert issubclass(error, ExpenseServiceError)
