from django.db import models


class Category(models.Model):
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True, default="")
    icon_name = models.CharField(max_length=100, blank=True, default="")
    # Soft delete flag; inactive categories disappear from the public catalog
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Jewellery(models.Model):
    name = models.CharField(max_length=200)
    description = models.CharField(max_length=500, blank=True, default="")
    price = models.DecimalField(max_digits=18, decimal_places=2)
    # Either an absolute URL or a bare file name resolved against the image base URL
    image_url = models.CharField(max_length=500, blank=True, default="")
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="jewellery"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "jewellery"
        indexes = [
            models.Index(fields=["name"], name="jewellery_name_idx"),
        ]

    def __str__(self):
        return self.name
