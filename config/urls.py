from django.contrib import admin
from django.conf import settings
from django.conf.urls.static import static
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    path("", include("apps.core.urls")),

    path("Clients/", include("apps.clients.urls")),
    path("", include("apps.fleet.urls")),
    path("Masters/", include("apps.staff.urls")),
    path("Services/", include("apps.catalog.urls")),
    path("", include("apps.orders.urls")),
    path("Reports/", include("apps.reports.urls")),
]


if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
