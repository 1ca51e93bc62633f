from django.urls import path
from . import views

app_name = "clients"

urlpatterns = [
    path("", views.client_list, name="list"),
    path("Details/<int:pk>", views.client_detail, name="detail"),
    path("Create", views.client_create, name="create"),
    path("Edit/<int:pk>", views.client_update, name="update"),
    path("Delete/<int:pk>", views.client_delete, name="delete"),
]
