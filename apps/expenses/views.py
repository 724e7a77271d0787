from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .exceptions import ExpenseServiceError
from .serializers import (
    ExpenseSplitInputSerializer,
    ExpenseSplitResponseSerializer,
    ErrorSerializer,
)
from .services import ExpenseSplitService


@extend_schema(
    request=ExpenseSplitInputSerializer,
    responses={
        200: ExpenseSplitResponseSerializer,
        400: ErrorSerializer,
    },
    description="Split an expense equally between members, cent-precise.",
    tags=['expenses'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def split_expense(request):
    """Split an expense between members - thin HTTP handler."""
    serializer = ExpenseSplitInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    try:
        splits = ExpenseSplitService.distribute_amount(params['amount'], params['member_ids'])
    except ExpenseServiceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    data = {
        'amount': params['amount'],
        'splits': [{'member_id': member_id, 'amount': amount} for member_id, amount in splits],
    }
    return Response(ExpenseSplitResponseSerializer(data).data)
