from rest_framework import serializers

from apps.users.validators import (
    validate_password as validate_password_rules,
    validate_username as validate_username_rules,
)


class RegisterRequestSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate_username(self, value: str) -> str:
        return validate_username_rules(value)

    def validate_password(self, value: str) -> str:
        return validate_password_rules(value)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class AuthUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()


class AuthResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    refresh = serializers.CharField()
    user = AuthUserSerializer()


class MeResponseSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField(allow_null=True)
    isStaff = serializers.BooleanField(source="is_staff")
    dateJoined = serializers.DateTimeField(source="date_joined")
    lastLogin = serializers.DateTimeField(source="last_login", allow_null=True)


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField()


class ChangePasswordRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    oldPassword = serializers.CharField(source="old_password", write_only=True)
    newPassword = serializers.CharField(source="new_password", write_only=True)

    def validate_newPassword(self, value: str) -> str:
        return validate_password_rules(value)
