import re

from rest_framework import serializers

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.]+$")


def validate_username(value: str) -> str:
    """Trim and check a username: 4-100 characters of letters, digits, ``_`` or ``.``."""
    if value is None:
        raise serializers.ValidationError("Username is required.")
    trimmed = value.strip()
    if not USERNAME_MIN_LENGTH <= len(trimmed) <= USERNAME_MAX_LENGTH:
        raise serializers.ValidationError(
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters long."
        )
    if not _USERNAME_PATTERN.match(trimmed):
        raise serializers.ValidationError(
            "Username may contain only letters, numbers, underscores and dots."
        )
    return trimmed


def validate_password(value: str) -> str:
    if value is None:
        raise serializers.ValidationError("Password is required.")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise serializers.ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long."
        )
    if not any(ch.isalpha() for ch in value) or not any(ch.isdigit() for ch in value):
        raise serializers.ValidationError(
            "Password must include at least one letter and one number."
        )
    return value
