from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.formatting import format_currency
from apps.core.models import VersionedModel


class Master(VersionedModel):
    full_name = models.CharField("full name", max_length=100)
    position = models.CharField(max_length=50)
    rank = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(6)],
        help_text="Qualification rank, 1 to 6.",
    )
    hourly_rate = models.DecimalField(
        "hourly rate",
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(10000)],
    )

    class Meta:
        ordering = ["full_name"]

    def __str__(self):
        return self.full_name

    @property
    def master_info(self) -> str:
        return f"{self.full_name} ({self.position}, rank {self.rank})"

    @property
    def formatted_hourly_rate(self) -> str:
        return f"{format_currency(self.hourly_rate)}/hr"

    @property
    def select_label(self) -> str:
        return f"{self.master_info} - {self.formatted_hourly_rate}"
