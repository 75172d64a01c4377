from django.urls import include, path

# Each app declares its full route under /api/, so the order here only matters
# where prefixes overlap (``user/me`` before ``user/<id>``).
urlpatterns = [
    path("", include("apps.auth.urls")),
    path("", include("apps.users.urls")),
    path("", include("apps.catalog.urls")),
    path("", include("apps.carts.urls")),
    path("", include("apps.orders.urls")),
    path("", include("apps.favorites.urls")),
]
