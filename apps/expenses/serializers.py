from decimal import Decimal

from rest_framework import serializers


class ExpenseSplitInputSerializer(serializers.Serializer):
    """
    Validate the body of the split endpoint.

    Fields:
        amount (Decimal): Expense amount, at least 0.01
        member_ids (list[str]): Members sharing the expense, in the order
            extra cents are handed out
    """

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )
    member_ids = serializers.ListField(
        child=serializers.CharField(max_length=255),
        allow_empty=False,
    )

    def validate_member_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError('Each member can only be listed once')
        return value


class ExpenseSplitSerializer(serializers.Serializer):
    member_id = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class ExpenseSplitResponseSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    splits = ExpenseSplitSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
