from django.urls import path
from . import views

app_name = "fleet"

urlpatterns = [
    path("Cars/", views.car_list, name="car_list"),
    path("Cars/Details/<int:pk>", views.car_detail, name="car_detail"),
    path("Cars/Create", views.car_create, name="car_create"),
    path("Cars/Edit/<int:pk>", views.car_update, name="car_update"),
    path("Cars/Delete/<int:pk>", views.car_delete, name="car_delete"),

    path("Tires/", views.tire_list, name="tire_list"),
    path("Tires/Details/<int:pk>", views.tire_detail, name="tire_detail"),
    path("Tires/Create", views.tire_create, name="tire_create"),
    path("Tires/Edit/<int:pk>", views.tire_update, name="tire_update"),
    path("Tires/Delete/<int:pk>", views.tire_delete, name="tire_delete"),
]
