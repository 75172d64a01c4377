from rest_framework import serializers

from apps.api.schemas import message_envelope
from .models import PaymentMethod


class OrderAddressSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    street = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    postalCode = serializers.CharField(source="postal_code")
    country = serializers.CharField()


class OrderItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    jewelleryId = serializers.IntegerField(source="jewellery_id")
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    imageUrl = serializers.CharField(source="image_url", allow_blank=True)
    quantity = serializers.IntegerField()
    price = serializers.CharField()


class OrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    totalAmount = serializers.CharField(source="total_amount")
    status = serializers.CharField()
    orderDate = serializers.CharField(source="order_date", allow_null=True)
    paymentMethod = serializers.CharField(source="payment_method")
    address = OrderAddressSerializer()
    items = OrderItemSerializer(many=True)


class CreateOrderSerializer(serializers.Serializer):
    addressId = serializers.IntegerField(source="address_id", min_value=1)
    paymentMethod = serializers.ChoiceField(
        source="payment_method", choices=PaymentMethod.values
    )


OrderCreatedResponseSerializer = message_envelope(
    "OrderCreatedResponse", "order", OrderSerializer
)
