from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.clients.models import Client
from apps.core.dashboard import RECENT_ORDERS, build_dashboard
from apps.fleet.models import Car
from apps.orders.models import CompletedWork, Order

from .conftest import VIN

pytestmark = pytest.mark.django_db


def make_car(client, plate="В456ОР77"):
    return Car.objects.create(
        client=client, brand="Lada", model="Granta",
        manufacture_year=2018, license_plate=plate, vin=VIN,
    )


class TestDashboard:
    def test_empty_database(self):
        summary = build_dashboard()
        assert summary.orders_count == 0
        assert summary.top_clients == []
        assert summary.recent_orders == []

    def test_active_plus_completed_is_total(self, car, order, work, service, master):
        Order.objects.create(car=car)
        second = Order.objects.create(car=car, master=master)
        # two works on one order still count it once
        for _ in range(2):
            CompletedWork.objects.create(
                order=second, service=service, master=master,
                wheel_count=2, completion_time_min=30, work_total=Decimal("500"),
            )

        summary = build_dashboard()
        assert summary.orders_count == 3
        assert summary.completed_orders == 2
        assert summary.active_orders == 1
        assert summary.active_orders + summary.completed_orders == summary.orders_count

    def test_counts(self, order, work, tire):
        summary = build_dashboard()
        assert summary.clients_count == 1
        assert summary.cars_count == 1
        assert summary.tires_count == 1
        assert summary.masters_count == 1
        assert summary.services_count == 1
        assert summary.completed_works_count == 1
        assert summary.today_orders == 1
        assert summary.unpaid_orders == 1
        assert summary.orders_with_master == 1

    def test_top_clients(self, owner, car):
        quiet = Client.objects.create(full_name="Anna Quiet", phone="+79990000011")
        busy = Client.objects.create(full_name="Boris Busy", phone="+79990000012")
        Client.objects.create(full_name="Clara None", phone="+79990000013")
        busy_car = make_car(busy)
        for _ in range(3):
            Order.objects.create(car=busy_car)
        Order.objects.create(car=make_car(quiet, "Е789КХ99"))
        Order.objects.create(car=car)
        Order.objects.create(car=car)

        top = build_dashboard().top_clients
        assert [(t.client.full_name, t.order_count) for t in top] == [
            ("Boris Busy", 3),
            ("Ivan Petrov", 2),
            ("Anna Quiet", 1),
        ]

    def test_recent_orders_newest_first(self, car):
        now = timezone.now()
        for days in range(RECENT_ORDERS + 2):
            Order.objects.create(car=car, order_date=now - timedelta(days=days))

        recent = build_dashboard().recent_orders
        assert len(recent) == RECENT_ORDERS
        dates = [o.order_date for o in recent]
        assert dates == sorted(dates, reverse=True)
        assert recent[0].order_date == now
