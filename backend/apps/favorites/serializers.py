from rest_framework import serializers

from apps.catalog.serializers import JewellerySerializer


class FavoriteSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    createdAt = serializers.CharField(source="created_at", allow_null=True)
    jewellery = JewellerySerializer()


class FavoriteToggleResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    isFavorited = serializers.BooleanField()


class FavoriteStatusSerializer(serializers.Serializer):
    jewelleryId = serializers.IntegerField()
    isFavorited = serializers.BooleanField()


class BatchStatusRequestSerializer(serializers.Serializer):
    """Accepts either a bare JSON list of ids or ``{"jewelleryIds": [...]}``."""

    jewelleryIds = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=True
    )

    def to_internal_value(self, data):
        if isinstance(data, list):
            data = {"jewelleryIds": data}
        return super().to_internal_value(data)
