from rest_framework import serializers

from apps.api.schemas import message_envelope


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    iconName = serializers.CharField(source="icon_name", allow_blank=True)
    jewelleryCount = serializers.IntegerField(source="jewellery_count", read_only=True)


class CategoryWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )
    iconName = serializers.CharField(
        source="icon_name", max_length=100, required=False, allow_blank=True, default=""
    )


CategoryMutationResponseSerializer = message_envelope(
    "CategoryMutationResponse", "category", CategorySerializer
)


class JewellerySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_blank=True)
    categoryId = serializers.IntegerField(source="category_id")
    categoryName = serializers.CharField(source="category_name", allow_null=True)
    createdAt = serializers.CharField(source="created_at", allow_null=True, read_only=True)
    updatedAt = serializers.CharField(source="updated_at", allow_null=True, read_only=True)


class JewelleryWriteSerializer(serializers.Serializer):
    # 'id' is server-assigned and never accepted from clients
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )
    price = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=0)
    imageUrl = serializers.CharField(
        source="image_url", max_length=500, required=False, allow_blank=True, default=""
    )
    categoryId = serializers.IntegerField(source="category_id", min_value=1)


class JewelleryListQuerySerializer(serializers.Serializer):
    categoryId = serializers.IntegerField(source="category_id", required=False, min_value=1)
