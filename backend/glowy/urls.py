from pathlib import Path

from django.conf import settings
from django.contrib import admin
from django.http import HttpResponse, JsonResponse
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from apps.common.views import live_health, ready_health

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]


def _static_schema_response(fmt: str):  # pragma: no cover (simple IO)
    file_path = Path(settings.BASE_DIR) / "static" / (
        settings.OPENAPI_STATIC_JSON if fmt == "json" else settings.OPENAPI_STATIC_YAML
    )
    if not file_path.exists():
        return JsonResponse(
            {
                "error": {
                    "code": "NOT_FOUND",
                    "message": "Static schema not found. Export it or enable DEBUG for the dynamic schema.",
                    "status": 404,
                }
            },
            status=404,
        )
    content_type = "application/json" if fmt == "json" else "application/yaml"
    return HttpResponse(file_path.read_text(), content_type=content_type)


# In DEBUG the schema is generated live; otherwise a pre-exported file is served.
if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema"),
            name="redoc",
        ),
    ]
else:
    urlpatterns += [
        path("schema/", lambda r: _static_schema_response("json"), name="schema-json"),
        path(
            "schema.yaml", lambda r: _static_schema_response("yaml"), name="schema-yaml"
        ),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema-json"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema-json"),
            name="redoc",
        ),
    ]
