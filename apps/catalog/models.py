from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.formatting import format_currency
from apps.core.models import VersionedModel


class Service(VersionedModel):
    code = models.AutoField("service code", primary_key=True)
    name = models.CharField("service name", max_length=100)
    cost = models.DecimalField(
        "service cost",
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(1_000_000)],
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} - {format_currency(self.cost)}"

    @property
    def formatted_cost(self) -> str:
        return format_currency(self.cost)
