from django.conf import settings
from django.db import models

from apps.catalog.models import Jewellery
from apps.users.models import Address


class PaymentMethod(models.TextChoices):
    CREDIT_CARD = "CreditCard", "Credit Card"
    PAYPAL = "PayPal", "PayPal"
    BANK_TRANSFER = "BankTransfer", "Bank Transfer"


class OrderStatus(models.TextChoices):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class Order(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="orders"
    )
    # Addresses referenced by orders cannot be deleted
    address = models.ForeignKey(Address, on_delete=models.PROTECT, related_name="orders")
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    total_amount = models.DecimalField(max_digits=18, decimal_places=2)
    status = models.CharField(
        max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )
    order_date = models.DateTimeField()
    shipped_date = models.DateTimeField(null=True, blank=True)
    delivered_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-order_date", "-id"]
        indexes = [
            models.Index(fields=["user", "-order_date"], name="order_user_date_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} for {self.user_id}"


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    jewellery = models.ForeignKey(
        Jewellery, on_delete=models.PROTECT, related_name="order_items"
    )
    quantity = models.PositiveIntegerField()
    # Unit price at purchase time
    price = models.DecimalField(max_digits=18, decimal_places=2)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} x {self.jewellery_id} in order {self.order_id}"
