from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    InvitationCreateSerializer,
    InvitationSerializer,
    IssuedInvitationSerializer,
    ErrorSerializer,
)
from .services import (
    issue_invitation,
    resolve_invitation,
    AlreadyMemberError,
    InvalidInvitationError,
    InvitationExpiredError,
)


@extend_schema(
    request=InvitationCreateSerializer,
    responses={
        201: IssuedInvitationSerializer,
        400: ErrorSerializer,
    },
    description="Issue an invitation link to join a group. The link expires after 7 days.",
    tags=['invitations'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_invitation(request):
    """Issue a group invitation - thin HTTP handler."""
    serializer = InvitationCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    params = serializer.validated_data

    try:
        invitation = issue_invitation(
            group_id=params['group_id'],
            group_name=params['group_name'],
            email=params['email'],
            inviter_name=params['inviter_name'],
            existing_member_emails=params['existing_member_emails'],
        )
    except AlreadyMemberError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(
        IssuedInvitationSerializer(invitation).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    responses={
        200: InvitationSerializer,
        404: ErrorSerializer,
        410: ErrorSerializer,
    },
    description="Resolve an invitation token into the invitation it carries.",
    tags=['invitations'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def invitation_detail(request, token):
    """Resolve an invitation token - thin HTTP handler."""
    try:
        invitation = resolve_invitation(token=token)
    except InvitationExpiredError as e:
        return Response({'error': str(e)}, status=status.HTTP_410_GONE)
    except InvalidInvitationError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(InvitationSerializer(invitation).data)
