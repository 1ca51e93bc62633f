from decimal import Decimal

import pytest
from django.utils import timezone

from apps.core.formatting import format_currency, round_money
from apps.clients.models import Client
from apps.fleet.models import Car, Tire
from apps.orders.models import CompletedWork, Order
from apps.staff.models import Master


class TestFormatting:
    def test_round_money_half_up(self):
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("2.344")) == Decimal("2.34")

    def test_format_currency_groups_thousands(self, settings):
        settings.CURRENCY_SYMBOL = "₽"
        assert format_currency(Decimal("1500")) == "1 500,00 ₽"
        assert format_currency(Decimal("1234567.891")) == "1 234 567,89 ₽"

    def test_format_currency_none_is_zero(self, settings):
        settings.CURRENCY_SYMBOL = "₽"
        assert format_currency(None) == "0,00 ₽"


class TestCompletedWorkRates:
    def test_hourly_rate(self):
        work = CompletedWork(work_total=Decimal("120"), completion_time_min=60, wheel_count=4)
        assert work.hourly_rate == Decimal("120.00")

    def test_hourly_rate_scales_to_an_hour(self):
        work = CompletedWork(work_total=Decimal("500"), completion_time_min=30, wheel_count=4)
        assert work.hourly_rate == Decimal("1000.00")

    def test_zero_time_gives_zero_rate(self):
        work = CompletedWork(work_total=Decimal("120"), completion_time_min=0, wheel_count=0)
        assert work.hourly_rate == Decimal("0")

    def test_cost_per_wheel(self):
        work = CompletedWork(work_total=Decimal("1000"), completion_time_min=45, wheel_count=3)
        assert work.cost_per_wheel == Decimal("333.33")

    def test_no_wheels_gives_zero_cost(self):
        work = CompletedWork(work_total=Decimal("1000"), completion_time_min=45, wheel_count=0)
        assert work.cost_per_wheel == Decimal("0")


class TestTire:
    @pytest.mark.parametrize("wear, expected", [
        (0, "Excellent"),
        (15, "Excellent"),
        (20, "Good"),
        (49, "Good"),
        (50, "Fair"),
        (79, "Fair"),
        (80, "Needs replacement"),
        (100, "Needs replacement"),
    ])
    def test_condition(self, wear, expected):
        assert Tire(wear_percentage=wear).condition == expected

    @pytest.mark.parametrize("pressure, expected", [
        (Decimal("1.7"), "Low"),
        (Decimal("1.8"), "Normal"),
        (Decimal("2.5"), "Normal"),
        (Decimal("3.0"), "Normal"),
        (Decimal("3.1"), "High"),
    ])
    def test_pressure_recommendation(self, pressure, expected):
        assert Tire(pressure=pressure).pressure_recommendation == expected

    def test_season_checks(self):
        tire = Tire(seasonality="Winter studded")
        assert tire.is_winter()
        assert not tire.is_summer()
        assert Tire(seasonality="All-season").is_all_season()

    def test_full_name(self):
        tire = Tire(manufacturer="Michelin", tire_model="X-Ice", size="205/55 R16")
        assert tire.full_name == "Michelin X-Ice 205/55 R16"


class TestCar:
    def test_age_and_is_new(self):
        this_year = timezone.localdate().year
        assert Car(manufacture_year=this_year - 2).age == 2
        assert Car(manufacture_year=this_year - 5).is_new
        assert not Car(manufacture_year=this_year - 6).is_new

    def test_full_info(self):
        car = Car(brand="Lada", model="Vesta", license_plate="А123ВС777", manufacture_year=2020)
        assert car.full_info == "Lada Vesta (А123ВС777) [2020]"
        assert car.photo_path == ""


class TestClient:
    def test_formatted_phone(self):
        assert Client(phone="+79991234567").formatted_phone == "+7 (999) 123-45-67"
        assert Client(phone="8 800 555-35-35").formatted_phone == "8 800 555-35-35"
        assert Client(phone="").formatted_phone == "Not specified"

    def test_str_carries_id(self, owner):
        assert str(owner) == f"Ivan Petrov (ID: {owner.pk})"

    def test_car_count(self, owner, car):
        assert owner.car_count == 1
        assert owner.has_cars()


class TestMaster:
    def test_labels(self, settings):
        settings.CURRENCY_SYMBOL = "₽"
        master = Master(full_name="Oleg Smirnov", position="Fitter", rank=3, hourly_rate=Decimal("750"))
        assert master.master_info == "Oleg Smirnov (Fitter, rank 3)"
        assert master.formatted_hourly_rate == "750,00 ₽/hr"
        assert master.select_label == "Oleg Smirnov (Fitter, rank 3) - 750,00 ₽/hr"


class TestOrder:
    def test_payment_status(self, order):
        assert order.payment_status == "Unpaid"
        assert not order.is_paid

        order.payment_date = timezone.now()
        assert order.payment_status == "Paid"
        assert order.is_paid

    def test_master_assignment(self, order):
        assert order.has_assigned_master()
        order.master = None
        assert not order.has_assigned_master()

    def test_summary(self, order):
        assert order.summary.startswith(f"Order #{order.order_number} of ")
        assert "Car: Toyota Camry (А123ВС777)" in order.summary
        assert "Master: Sergey Ivanov" in order.summary
        assert order.summary.endswith("Status: Unpaid")

    def test_new_orders_default_to_now(self, car):
        before = timezone.now()
        order = Order.objects.create(car=car)
        assert order.order_date >= before
        assert order.master is None
        assert order.version == 1
