from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .exceptions import SettlementServiceError
from .serializers import (
    # Input serializers
    SettlementPlanInputSerializer,
    ApplyTransfersInputSerializer,
    # Response serializers
    SettlementSummarySerializer,
    AppliedBalancesSerializer,
    ErrorSerializer,
)
from .services import SettlementService


@extend_schema(
    request=SettlementPlanInputSerializer,
    responses={
        200: SettlementSummarySerializer,
        400: ErrorSerializer,
    },
    description=(
        "Compute the transfers that settle a group's debts. Members with a "
        "positive balance are owed money, members with a negative balance owe it."
    ),
    tags=['settlements'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def plan_settlements(request):
    """Compute a settlement plan - thin HTTP handler."""
    serializer = SettlementPlanInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        summary = SettlementService.get_settlement_summary(
            serializer.get_members(),
            require_balanced=serializer.validated_data.get('require_balanced'),
        )
    except SettlementServiceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(SettlementSummarySerializer(summary).data)


@extend_schema(
    request=ApplyTransfersInputSerializer,
    responses={
        200: AppliedBalancesSerializer,
        400: ErrorSerializer,
    },
    description="Apply payments that were made to the members' balances.",
    tags=['settlements'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def apply_transfers(request):
    """Apply recorded payments to balances - thin HTTP handler."""
    serializer = ApplyTransfersInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        members = SettlementService.apply_transfers(
            serializer.get_members(),
            serializer.get_transfers(),
        )
    except SettlementServiceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    data = {
        'members': members,
        'is_settled': all(member.is_settled for member in members),
    }
    return Response(AppliedBalancesSerializer(data).data)
