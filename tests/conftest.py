from decimal import Decimal

import pytest

from apps.catalog.models import Service
from apps.clients.models import Client
from apps.fleet.models import Car, Tire
from apps.orders.models import CompletedWork, Order
from apps.staff.models import Master

PLATE = "А123ВС777"
VIN = "JH4KA7561PC008269"


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def owner(db):
    return Client.objects.create(full_name="Ivan Petrov", phone="+79991234567")


@pytest.fixture
def car(owner):
    return Car.objects.create(
        client=owner,
        brand="Toyota",
        model="Camry",
        manufacture_year=2019,
        license_plate=PLATE,
        vin=VIN,
    )


@pytest.fixture
def tire(car):
    return Tire.objects.create(
        car=car,
        tire_type="Radial",
        seasonality="Winter",
        manufacturer="Nokian",
        tire_model="Hakkapeliitta 10",
        size="205/55 R16",
        load_index=94,
        wear_percentage=15,
        pressure=Decimal("2.2"),
    )


@pytest.fixture
def master(db):
    return Master.objects.create(
        full_name="Sergey Ivanov",
        position="Tyre fitter",
        rank=4,
        hourly_rate=Decimal("800.00"),
    )


@pytest.fixture
def service(db):
    return Service.objects.create(name="Wheel balancing", cost=Decimal("1500.00"))


@pytest.fixture
def order(car, master):
    return Order.objects.create(car=car, master=master)


@pytest.fixture
def work(order, service, master):
    return CompletedWork.objects.create(
        order=order,
        service=service,
        master=master,
        wheel_count=4,
        completion_time_min=60,
        work_total=Decimal("2000.00"),
    )


def car_data(owner, **overrides):
    data = {
        "client": owner.pk,
        "brand": "Kia",
        "model": "Rio",
        "manufacture_year": 2021,
        "license_plate": PLATE,
        "vin": VIN,
    }
    data.update(overrides)
    return data
