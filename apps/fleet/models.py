from decimal import Decimal

from django.core.validators import (
    FileExtensionValidator,
    MaxValueValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models
from django.utils import timezone

from apps.core.models import VersionedModel

from .photos import PHOTO_EXTENSIONS, car_photo_path, validate_photo_size

NEW_CAR_MAX_AGE = 5

license_plate_validator = RegexValidator(
    regex=r"^[АВЕКМНОРСТУХ]\d{3}[АВЕКМНОРСТУХ]{2}\d{2,3}$",
    message="Invalid licence plate format. Example: А123ВС777",
)
vin_validator = RegexValidator(
    regex=r"^[A-HJ-NPR-Z0-9]{17}$",
    message="VIN must be exactly 17 characters: Latin letters except I, O, Q, and digits.",
)


class Car(VersionedModel):
    client = models.ForeignKey("clients.Client", on_delete=models.CASCADE, related_name="cars")

    brand = models.CharField(max_length=50)
    model = models.CharField(max_length=50)
    manufacture_year = models.PositiveIntegerField(
        "manufacture year",
        validators=[MinValueValidator(1900), MaxValueValidator(2100)],
    )
    license_plate = models.CharField("licence plate", max_length=20, validators=[license_plate_validator])
    vin = models.CharField("VIN", max_length=17, validators=[vin_validator])

    photo = models.FileField(
        upload_to=car_photo_path,
        blank=True,
        validators=[FileExtensionValidator(PHOTO_EXTENSIONS), validate_photo_size],
    )

    class Meta:
        ordering = ["brand", "model", "license_plate"]

    def __str__(self):
        return f"{self.brand} {self.model} ({self.license_plate})"

    @property
    def full_info(self) -> str:
        return f"{self.brand} {self.model} ({self.license_plate}) [{self.manufacture_year}]"

    @property
    def age(self) -> int:
        return timezone.localdate().year - self.manufacture_year

    @property
    def is_new(self) -> bool:
        return self.age <= NEW_CAR_MAX_AGE

    @property
    def photo_path(self) -> str:
        return self.photo.name if self.photo else ""


class Tire(VersionedModel):
    CONDITION_EXCELLENT = "Excellent"
    CONDITION_GOOD = "Good"
    CONDITION_FAIR = "Fair"
    CONDITION_REPLACE = "Needs replacement"

    PRESSURE_LOW = "Low"
    PRESSURE_HIGH = "High"
    PRESSURE_NORMAL = "Normal"

    LOW_PRESSURE_BAR = Decimal("1.8")
    HIGH_PRESSURE_BAR = Decimal("3.0")

    car = models.ForeignKey(Car, on_delete=models.CASCADE, related_name="tires")

    tire_type = models.CharField("tyre type", max_length=50)
    seasonality = models.CharField(max_length=50)
    manufacturer = models.CharField(max_length=50)
    tire_model = models.CharField("tyre model", max_length=50)
    size = models.CharField(max_length=20)
    load_index = models.PositiveIntegerField("load index", default=0)
    wear_percentage = models.PositiveSmallIntegerField(
        "wear, %",
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    pressure = models.DecimalField(
        "pressure, bar",
        max_digits=3,
        decimal_places=1,
        validators=[MinValueValidator(0), MaxValueValidator(10)],
    )

    class Meta:
        ordering = ["car", "manufacturer", "tire_model"]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self) -> str:
        return f"{self.manufacturer} {self.tire_model} {self.size}"

    @property
    def condition(self) -> str:
        wear = self.wear_percentage
        if wear < 20:
            return self.CONDITION_EXCELLENT
        if wear < 50:
            return self.CONDITION_GOOD
        if wear < 80:
            return self.CONDITION_FAIR
        return self.CONDITION_REPLACE

    @property
    def pressure_recommendation(self) -> str:
        pressure = Decimal(str(self.pressure))
        if pressure < self.LOW_PRESSURE_BAR:
            return self.PRESSURE_LOW
        if pressure > self.HIGH_PRESSURE_BAR:
            return self.PRESSURE_HIGH
        return self.PRESSURE_NORMAL

    def _season_matches(self, *markers) -> bool:
        season = (self.seasonality or "").lower()
        return any(m in season for m in markers)

    def is_winter(self) -> bool:
        return self._season_matches("winter", "зим")

    def is_summer(self) -> bool:
        return self._season_matches("summer", "лет")

    def is_all_season(self) -> bool:
        return self._season_matches("all-season", "all season", "всесезон")
