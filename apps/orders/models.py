from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.formatting import round_money
from apps.core.models import VersionedModel


class Order(VersionedModel):
    STATUS_PAID = "Paid"
    STATUS_UNPAID = "Unpaid"

    order_number = models.AutoField("order number", primary_key=True)
    order_date = models.DateTimeField("order date", default=timezone.now)

    car = models.ForeignKey("fleet.Car", on_delete=models.CASCADE, related_name="orders")
    master = models.ForeignKey(
        "staff.Master",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    payment_date = models.DateTimeField("payment date", null=True, blank=True)

    class Meta:
        ordering = ["-order_date", "-order_number"]
        indexes = [
            models.Index(fields=["order_date"], name="orders_order_date_idx"),
        ]

    def __str__(self):
        return f"Order #{self.order_number}"

    @property
    def payment_status(self) -> str:
        return self.STATUS_PAID if self.payment_date else self.STATUS_UNPAID

    @property
    def is_paid(self) -> bool:
        return self.payment_date is not None

    def has_assigned_master(self) -> bool:
        return self.master_id is not None

    @property
    def summary(self) -> str:
        car = self.car if self.car_id else None
        car_info = f"{car.brand} {car.model} ({car.license_plate})" if car else "No car"
        master_info = self.master.full_name if self.master_id else "No master assigned"
        date = timezone.localtime(self.order_date) if timezone.is_aware(self.order_date) else self.order_date
        return (
            f"Order #{self.order_number} of {date:%d.%m.%Y} | "
            f"Car: {car_info} | "
            f"Master: {master_info} | "
            f"Status: {self.payment_status}"
        )


class CompletedWork(VersionedModel):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="completed_works")
    service = models.ForeignKey("catalog.Service", on_delete=models.PROTECT, related_name="completed_works")
    master = models.ForeignKey("staff.Master", on_delete=models.PROTECT, related_name="completed_works")

    wheel_count = models.PositiveSmallIntegerField(
        "wheel count",
        validators=[MinValueValidator(0), MaxValueValidator(4)],
    )
    completion_time_min = models.PositiveSmallIntegerField(
        "completion time, min",
        validators=[MinValueValidator(1), MaxValueValidator(480)],
    )
    work_total = models.DecimalField(
        "work total",
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(1_000_000)],
    )

    class Meta:
        ordering = ["-order__order_date", "id"]

    def __str__(self):
        return f"Work #{self.pk} on order #{self.order_id}"

    @property
    def hourly_rate(self) -> Decimal:
        if not self.completion_time_min:
            return Decimal("0")
        return round_money(Decimal(str(self.work_total)) / self.completion_time_min * 60)

    @property
    def cost_per_wheel(self) -> Decimal:
        if not self.wheel_count:
            return Decimal("0")
        return round_money(Decimal(str(self.work_total)) / self.wheel_count)
