from django.urls import path

from .views import (
    CartAddView,
    CartClearView,
    CartItemDeleteView,
    CartItemUpdateView,
    CartView,
)

urlpatterns = [
    path("cart", CartView.as_view(), name="cart-detail"),
    path("cart/add", CartAddView.as_view(), name="cart-add"),
    path("cart/clear", CartClearView.as_view(), name="cart-clear"),
    path(
        "cart/update/<int:item_id>",
        CartItemUpdateView.as_view(),
        name="cart-item-update",
    ),
    path("cart/<int:item_id>", CartItemDeleteView.as_view(), name="cart-item-delete"),
]
