from apps.core.repository import Repository

from .forms import CarForm, TireForm
from .models import Car, Tire
from .photos import delete_photo_on_commit


class CarRepository(Repository):
    model = Car
    form_class = CarForm
    ordering = ("brand", "model", "license_plate")
    related = ("client",)

    def snapshot(self, obj):
        return obj.photo.name if obj.photo else ""

    def after_update(self, obj, before):
        # replaced or cleared photo
        current = obj.photo.name if obj.photo else ""
        if before and before != current:
            delete_photo_on_commit(before, obj.photo.storage)


class TireRepository(Repository):
    model = Tire
    form_class = TireForm
    ordering = ("car__brand", "car__model", "manufacturer", "tire_model")
    related = ("car", "car__client")
