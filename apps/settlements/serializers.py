"""
Serializers for settlements app.

This module contains:
1. Input serializers - Request body validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    MemberBalanceSerializer - One member's signed net balance
    SettlementPlanInputSerializer - Body of the plan endpoint
    ApplyTransfersInputSerializer - Body of the apply endpoint

Response Serializers:
    SettlementTransferSerializer - One suggested transfer
    MemberSettlementSerializer - Per-member totals of a plan
    SettlementSummarySerializer - Full settlement plan
    AppliedBalancesSerializer - Balances after recorded payments
"""

from collections import Counter
from decimal import ROUND_HALF_UP

from rest_framework import serializers

from .engine import MemberBalance


def _money_field(**kwargs):
    return serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        rounding=ROUND_HALF_UP,
        **kwargs
    )


# =============================================================================
# Input Serializers
# =============================================================================

class MemberBalanceSerializer(serializers.Serializer):
    """
    Validate one member balance.

    Fields:
        id (str): Stable member identifier
        name (str): Display name
        balance (Decimal): Positive when the member is owed money,
            negative when they owe money
    """

    id = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    balance = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        help_text='Signed net balance; positive means the member is owed money'
    )


class _MembersInputMixin:
    """Turn validated ``members`` into engine records and reject duplicate ids."""

    def validate_members(self, value):
        counts = Counter(member['id'] for member in value)
        duplicates = sorted(member_id for member_id, count in counts.items() if count > 1)
        if duplicates:
            raise serializers.ValidationError(
                f"Duplicate member ids: {', '.join(duplicates)}"
            )
        return value

    def get_members(self):
        return [MemberBalance.from_dict(member) for member in self.validated_data['members']]


class SettlementPlanInputSerializer(_MembersInputMixin, serializers.Serializer):
    """
    Validate the body of the settlement plan endpoint.

    Used by: plan_settlements

    Fields:
        members (list): Member balances of one group (may be empty)
        require_balanced (bool): Reject balances that don't sum to zero.
            Omit to use the server default.
    """

    members = MemberBalanceSerializer(many=True, allow_empty=True)
    require_balanced = serializers.BooleanField(required=False)


class SettlementTransferSerializer(serializers.Serializer):
    """
    One transfer: ``from`` pays ``to`` the given ``amount``.

    ``from`` and ``to`` are exposed under their wire names; in Python they
    are ``from_id`` and ``to_id``.
    """

    from_id = serializers.CharField(max_length=255)
    to_id = serializers.CharField(max_length=255)
    amount = _money_field()
    from_name = serializers.CharField(required=False, allow_blank=True)
    to_name = serializers.CharField(required=False, allow_blank=True)

    def get_fields(self):
        fields = super().get_fields()
        renamed = {
            'from': fields.pop('from_id'),
            'to': fields.pop('to_id'),
        }
        renamed['from'].source = 'from_id'
        renamed['to'].source = 'to_id'
        renamed.update(fields)
        return renamed


class ApplyTransfersInputSerializer(_MembersInputMixin, serializers.Serializer):
    """
    Validate the body of the apply endpoint.

    Used by: apply_transfers

    Fields:
        members (list): Member balances before the payments
        transfers (list): Payments that were made
    """

    members = MemberBalanceSerializer(many=True, allow_empty=False)
    transfers = SettlementTransferSerializer(many=True, allow_empty=True)

    def validate_transfers(self, value):
        for transfer in value:
            if transfer['amount'] <= 0:
                raise serializers.ValidationError('Transfer amounts must be positive')
        return value

    def get_transfers(self):
        return [
            {'from': t['from_id'], 'to': t['to_id'], 'amount': t['amount']}
            for t in self.validated_data['transfers']
        ]


# =============================================================================
# Response Serializers
# =============================================================================

class MemberSettlementSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    balance = _money_field()
    pays = _money_field()
    receives = _money_field()


class SettlementSummarySerializer(serializers.Serializer):
    """Settlement plan with per-member totals."""
    transfers = SettlementTransferSerializer(many=True)
    transfer_count = serializers.IntegerField()
    total_amount = _money_field()
    is_settled = serializers.BooleanField()
    members = MemberSettlementSerializer(many=True)


class SettledMemberBalanceSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    balance = _money_field()
    is_settled = serializers.BooleanField()


class AppliedBalancesSerializer(serializers.Serializer):
    """Balances after recorded payments were applied."""
    members = SettledMemberBalanceSerializer(many=True)
    is_settled = serializers.BooleanField()


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
