from rest_framework import serializers


class InvitationCreateSerializer(serializers.Serializer):
    """
    Validate the body of the invitation endpoint.

    Fields:
        group_id (UUID): Group the invitee is asked to join
        group_name (str): Group name shown on the invitation
        email (str): Invitee's email
        inviter_name (str): Who sends the invitation
        existing_member_emails (list[str]): Current members, used to reject
            invitations for people already in the group
    """

    group_id = serializers.UUIDField()
    group_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    inviter_name = serializers.CharField(max_length=100)
    existing_member_emails = serializers.ListField(
        child=serializers.EmailField(),
        required=False,
        default=list,
    )


class InvitationSerializer(serializers.Serializer):
    """Invitation as resolved from its token."""
    group_id = serializers.UUIDField()
    group_name = serializers.CharField()
    email = serializers.EmailField()
    invited_by = serializers.CharField()
    issued_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField()


class IssuedInvitationSerializer(InvitationSerializer):
    """Invitation as returned when it is issued."""
    token = serializers.CharField()
    invite_url = serializers.URLField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
