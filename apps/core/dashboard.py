from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from django.db.models import Count
from django.utils import timezone

from apps.catalog.models import Service
from apps.clients.models import Client
from apps.fleet.models import Car, Tire
from apps.orders.models import CompletedWork, Order
from apps.staff.models import Master

TOP_CLIENTS = 3
RECENT_ORDERS = 5


@dataclass
class TopClient:
    client: Client
    order_count: int


@dataclass
class DashboardSummary:
    clients_count: int = 0
    cars_count: int = 0
    orders_count: int = 0
    services_count: int = 0
    masters_count: int = 0
    tires_count: int = 0
    completed_works_count: int = 0

    active_orders: int = 0
    completed_orders: int = 0
    today_orders: int = 0
    unpaid_orders: int = 0
    orders_with_master: int = 0

    top_clients: List[TopClient] = field(default_factory=list)
    recent_orders: List[Order] = field(default_factory=list)


def build_dashboard() -> DashboardSummary:
    """
    Home page figures. Active and completed orders split on the same test
    (has at least one completed work), so they always add up to the total.
    """
    today = timezone.localdate()

    active = Order.objects.filter(completed_works__isnull=True).count()
    completed = (
        Order.objects
        .filter(completed_works__isnull=False)
        .distinct()
        .count()
    )

    top = (
        Client.objects
        .annotate(order_count=Count("cars__orders"))
        .order_by("-order_count", "full_name")[:TOP_CLIENTS]
    )

    recent = list(
        Order.objects
        .select_related("car", "car__client", "master")
        .order_by("-order_date", "-order_number")[:RECENT_ORDERS]
    )

    return DashboardSummary(
        clients_count=Client.objects.count(),
        cars_count=Car.objects.count(),
        orders_count=Order.objects.count(),
        services_count=Service.objects.count(),
        masters_count=Master.objects.count(),
        tires_count=Tire.objects.count(),
        completed_works_count=CompletedWork.objects.count(),
        active_orders=active,
        completed_orders=completed,
        today_orders=Order.objects.filter(order_date__date=today).count(),
        unpaid_orders=Order.objects.filter(payment_date__isnull=True).count(),
        orders_with_master=Order.objects.filter(master__isnull=False).count(),
        top_clients=[TopClient(client=c, order_count=c.order_count) for c in top],
        recent_orders=recent,
    )
