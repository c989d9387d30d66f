from django.urls import include, path, re_path

from events.handlers import HealthView

urlpatterns = [
    path("", include("events.urls")),
    re_path(r"^health/?$", HealthView.as_view(), name="health"),
]
