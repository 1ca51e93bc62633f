from django.urls import path
from . import views

app_name = "catalog"

urlpatterns = [
    path("", views.service_list, name="list"),
    path("Details/<int:pk>", views.service_detail, name="detail"),
    path("Create", views.service_create, name="create"),
    path("Edit/<int:pk>", views.service_update, name="update"),
    path("Delete/<int:pk>", views.service_delete, name="delete"),
]
