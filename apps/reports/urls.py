from django.urls import path
from . import views

app_name = "reports"

urlpatterns = [
    path("orders.csv", views.export_orders_csv, name="export_orders_csv"),
    path("orders.xlsx", views.export_orders_xlsx, name="export_orders_xlsx"),
    path("completed-works.csv", views.export_works_csv, name="export_works_csv"),
    path("completed-works.xlsx", views.export_works_xlsx, name="export_works_xlsx"),
]
