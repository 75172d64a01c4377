from rest_framework import serializers

from apps.api.schemas import message_envelope


class CartItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    jewelleryId = serializers.IntegerField(source="jewellery_id")
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_blank=True)
    quantity = serializers.IntegerField()
    addedAt = serializers.CharField(source="added_at", allow_null=True)


class CartSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    items = CartItemSerializer(many=True)
    totalItems = serializers.IntegerField(source="total_items")
    totalAmount = serializers.CharField(source="total_amount")


CartMutationResponseSerializer = message_envelope(
    "CartMutationResponse", "cart", CartSerializer
)


class AddToCartSerializer(serializers.Serializer):
    jewelleryId = serializers.IntegerField(source="jewellery_id", min_value=1)
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)


class UpdateCartItemSerializer(serializers.Serializer):
    # Zero or negative removes the line
    quantity = serializers.IntegerField()
