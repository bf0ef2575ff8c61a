from django.urls import include, path, register_converter

from .converters import RowIdConverter

# Must be registered before the app url modules below are imported
register_converter(RowIdConverter, "rowid")

# Catalog and user routes spell out their full paths (no trailing slashes),
# so both are mounted at the API root.
urlpatterns = [
    path("", include("apps.catalog.urls")),
    path("", include("apps.users.urls")),
]
