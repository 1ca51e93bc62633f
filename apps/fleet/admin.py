from django.contrib import admin
from .models import Car, Tire

@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("license_plate", "brand", "model", "manufacture_year", "client", "vin")
    list_filter = ("brand", "manufacture_year")
    search_fields = ("license_plate", "vin", "brand", "model", "client__full_name")

@admin.register(Tire)
class TireAdmin(admin.ModelAdmin):
    list_display = ("car", "manufacturer", "tire_model", "size", "seasonality", "wear_percentage", "pressure")
    list_filter = ("seasonality", "manufacturer")
    search_fields = ("manufacturer", "tire_model", "size", "car__license_plate", "car__vin")
