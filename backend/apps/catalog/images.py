from typing import Optional

from django.conf import settings


def image_base_url(request=None) -> str:
    """Base URL that bare image file names are joined onto.

    ``JEWELLERY_IMAGE_BASE_URL`` wins when configured; otherwise the image path
    is made absolute against the current request.
    """
    configured = getattr(settings, "JEWELLERY_IMAGE_BASE_URL", "") or ""
    if configured:
        return configured.rstrip("/")
    path = getattr(settings, "JEWELLERY_IMAGE_PATH", "/images/jewelry/")
    if request is None:
        return path.rstrip("/")
    return request.build_absolute_uri(path).rstrip("/")


def resolve_image_url(image_url: Optional[str], base_url: str) -> str:
    if not image_url:
        return ""
    if image_url.startswith(("http://", "https://")):
        return image_url
    return f"{base_url.rstrip('/')}/{image_url.lstrip('/')}"
