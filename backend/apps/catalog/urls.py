from django.urls import path

from .views import (
    CategoryDetailView,
    CategoryJewelleryView,
    CategoryListView,
    JewelleryDetailView,
    JewelleryListView,
)

urlpatterns = [
    path("jewellery", JewelleryListView.as_view(), name="jewellery-list"),
    path(
        "jewellery/<int:jewellery_id>",
        JewelleryDetailView.as_view(),
        name="jewellery-detail",
    ),
    path("category", CategoryListView.as_view(), name="category-list"),
    path(
        "category/<int:category_id>",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    path(
        "category/<int:category_id>/jewellery",
        CategoryJewelleryView.as_view(),
        name="category-jewellery",
    ),
]
