from apps.core.repository import Repository

from .forms import CompletedWorkForm, OrderForm
from .models import CompletedWork, Order


class OrderRepository(Repository):
    model = Order
    form_class = OrderForm
    ordering = ("-order_date", "-order_number")
    related = ("car", "car__client", "master")

    def list(self):
        return super().list().prefetch_related("completed_works")


class CompletedWorkRepository(Repository):
    model = CompletedWork
    form_class = CompletedWorkForm
    ordering = ("-order__order_date", "id")
    related = ("order", "service", "master")
