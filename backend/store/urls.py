from django.urls import path, include
from apps.common.views import live_health, ready_health

urlpatterns = [
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

handler404 = "apps.api.views.not_found"
