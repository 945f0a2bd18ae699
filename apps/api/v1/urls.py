# apps/api/v1/urls.py
from django.urls import path, include

from apps.api.common.views import health_check

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("", include("apps.domains.forms.urls")),
    path("", include("apps.domains.submissions.urls")),
    path("", include("apps.domains.results.urls")),

    # =========================
    # Core
    # =========================
    path("core/", include("apps.core.urls")),

    # =========================
    # Health
    # =========================
    path("health/", health_check, name="health-check"),
]
