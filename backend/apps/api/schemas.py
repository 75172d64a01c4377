from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)
    hint = serializers.CharField(required=False, allow_blank=True)
    extra = serializers.JSONField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    error = ErrorDetailSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


def message_envelope(name: str, field: str, payload_serializer_class):
    """Schema for mutation responses shaped ``{"message": ..., <field>: <payload>}``."""
    return inline_serializer(
        name=name,
        fields={
            "message": serializers.CharField(),
            field: payload_serializer_class(),
        },
    )


def paginated_response(
    item_serializer_class: type[serializers.Serializer],
) -> type[serializers.Serializer]:
    """Envelope returned by list endpoints when ``?limit=`` is sent.

    Fields: count, next, previous, results[item_serializer].
    """
    name = getattr(item_serializer_class, "__name__", "Items")
    return inline_serializer(
        name=f"Paginated{name}",
        fields={
            "count": serializers.IntegerField(),
            "next": serializers.CharField(allow_null=True),
            "previous": serializers.CharField(allow_null=True),
            "results": item_serializer_class(many=True),
        },
    )
