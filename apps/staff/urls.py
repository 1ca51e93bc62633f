from django.urls import path
from . import views

app_name = "staff"

urlpatterns = [
    path("", views.master_list, name="list"),
    path("Details/<int:pk>", views.master_detail, name="detail"),
    path("Create", views.master_create, name="create"),
    path("Edit/<int:pk>", views.master_update, name="update"),
    path("Delete/<int:pk>", views.master_delete, name="delete"),
]
