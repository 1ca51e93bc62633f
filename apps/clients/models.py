from django.core.validators import RegexValidator
from django.db import models

from apps.core.models import VersionedModel

phone_validator = RegexValidator(
    regex=r"^\+?[0-9\s\-().]{5,20}$",
    message="Invalid phone number format.",
)


class Client(VersionedModel):
    full_name = models.CharField("full name", max_length=100)
    phone = models.CharField(max_length=20, validators=[phone_validator])

    class Meta:
        ordering = ["full_name"]

    def __str__(self):
        return f"{self.full_name} (ID: {self.pk})"

    @property
    def car_count(self) -> int:
        return self.cars.count()

    def has_cars(self) -> bool:
        return self.cars.exists()

    @property
    def formatted_phone(self) -> str:
        phone = (self.phone or "").strip()
        if not phone:
            return "Not specified"
        if phone.startswith("+7") and len(phone) == 12:
            return f"+7 ({phone[2:5]}) {phone[5:8]}-{phone[8:10]}-{phone[10:]}"
        return phone
