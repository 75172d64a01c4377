from django.urls import path

from .views import (
    FavoriteBatchStatusView,
    FavoriteDetailView,
    FavoriteListView,
    FavoriteStatusView,
)

urlpatterns = [
    path("favorites", FavoriteListView.as_view(), name="favorite-list"),
    path(
        "favorites/batch-status",
        FavoriteBatchStatusView.as_view(),
        name="favorite-batch-status",
    ),
    path(
        "favorites/status/<int:jewellery_id>",
        FavoriteStatusView.as_view(),
        name="favorite-status",
    ),
    path(
        "favorites/<int:jewellery_id>",
        FavoriteDetailView.as_view(),
        name="favorite-detail",
    ),
]
