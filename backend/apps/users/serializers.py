from rest_framework import serializers

from apps.api.schemas import message_envelope
from .validators import validate_username as validate_username_rules


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    username = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField(allow_null=True, required=False)
    dateJoined = serializers.CharField(source="date_joined", allow_null=True, read_only=True)


class UserUpdateSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()

    def validate_username(self, value: str) -> str:
        return validate_username_rules(value)


class AddressSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    street = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    postalCode = serializers.CharField(source="postal_code")
    country = serializers.CharField()
    isDefault = serializers.BooleanField(source="is_default")
    createdAt = serializers.CharField(source="created_at", allow_null=True, read_only=True)
    updatedAt = serializers.CharField(source="updated_at", allow_null=True, read_only=True)


class AddressWriteSerializer(serializers.Serializer):
    street = serializers.CharField(max_length=100)
    city = serializers.CharField(max_length=50)
    state = serializers.CharField(max_length=50)
    postalCode = serializers.CharField(source="postal_code", max_length=20)
    country = serializers.CharField(max_length=50)
    isDefault = serializers.BooleanField(source="is_default", required=False, default=False)


AddressMutationResponseSerializer = message_envelope(
    "AddressMutationResponse", "address", AddressSerializer
)


class UserEnvelopeSerializer(serializers.Serializer):
    user = UserSerializer()
