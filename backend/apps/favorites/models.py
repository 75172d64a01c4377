from django.conf import settings
from django.db import models

from apps.catalog.models import Jewellery


class Favorite(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="favorites"
    )
    jewellery = models.ForeignKey(
        Jewellery, on_delete=models.CASCADE, related_name="favorited_by"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "jewellery"], name="unique_user_favorite"
            ),
        ]

    def __str__(self):
        return f"{self.user_id} likes {self.jewellery_id}"
