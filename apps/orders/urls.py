from django.urls import path
from . import views

app_name = "orders"

urlpatterns = [
    path("Orders/", views.order_list, name="order_list"),
    path("Orders/Details/<int:pk>", views.order_detail, name="order_detail"),
    path("Orders/Create", views.order_create, name="order_create"),
    path("Orders/Edit/<int:pk>", views.order_update, name="order_update"),
    path("Orders/Delete/<int:pk>", views.order_delete, name="order_delete"),

    path("CompletedWorks/", views.work_list, name="work_list"),
    path("CompletedWorks/Details/<int:pk>", views.work_detail, name="work_detail"),
    path("CompletedWorks/Create", views.work_create, name="work_create"),
    path("CompletedWorks/Edit/<int:pk>", views.work_update, name="work_update"),
    path("CompletedWorks/Delete/<int:pk>", views.work_delete, name="work_delete"),
]
