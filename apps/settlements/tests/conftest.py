import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.settlements.engine import MemberBalance


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


# =============================================================================
# Member balances
# =============================================================================

@pytest.fixture
def one_creditor_two_debtors():
    """Alice is owed 30, Bob owes 10, Carol owes 20."""
    return [
        MemberBalance('a', 'Alice', Decimal('30.00')),
        MemberBalance('b', 'Bob', Decimal('-10.00')),
        MemberBalance('c', 'Carol', Decimal('-20.00')),
    ]


@pytest.fixture
def two_creditors_one_debtor():
    """Alice is owed 25, Bob is owed 15, Carol owes 40."""
    return [
        MemberBalance('a', 'Alice', Decimal('25.00')),
        MemberBalance('b', 'Bob', Decimal('15.00')),
        MemberBalance('c', 'Carol', Decimal('-40.00')),
    ]


@pytest.fixture
def trip_balances():
    """A balanced six-member group with a settled member."""
    return [
        MemberBalance('u1', 'Ana', Decimal('120.50')),
        MemberBalance('u2', 'Ben', Decimal('-45.25')),
        MemberBalance('u3', 'Cid', Decimal('0.00')),
        MemberBalance('u4', 'Dee', Decimal('-60.00')),
        MemberBalance('u5', 'Eve', Decimal('14.75')),
        MemberBalance('u6', 'Fay', Decimal('-30.00')),
    ]


@pytest.fixture
def balances_payload():
    """Request body for the plan endpoint."""
    return {
        'members': [
            {'id': 'a', 'name': 'Alice', 'balance': '30.00'},
            {'id': 'b', 'name': 'Bob', 'balance': '-10.00'},
            {'id': 'c', 'name': 'Carol', 'balance': '-20.00'},
        ]
    }
