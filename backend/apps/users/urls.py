from django.urls import path

from .views import AddressDetailView, AddressListView, UserDetailView

urlpatterns = [
    path("user/<int:user_id>", UserDetailView.as_view(), name="user-detail"),
    path("address", AddressListView.as_view(), name="address-list"),
    path(
        "address/<int:address_id>",
        AddressDetailView.as_view(),
        name="address-detail",
    ),
]
