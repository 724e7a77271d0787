"""
Settlements App - Debt Settlement Planning

This app turns the signed net balances of a group's members into the list
of payments that settles everybody's debts.

Key Features:
- Greedy largest-creditor vs largest-debtor matching (two priority queues)
- Cent-precise integer arithmetic, 0.01 tolerance for settled members
- Rejection of balances that don't sum to zero (configurable)
- Applying recorded payments back onto balances
- `settle_balances` management command for JSON files

Architecture:
- Engine: MemberBalance, SettlementTransfer, minimize_settlements
- Services: SettlementService
- Views: Stateless POST endpoints (plan, apply)
- Exceptions: Domain exception hierarchy
"""

__version__ = '1.0.0'
