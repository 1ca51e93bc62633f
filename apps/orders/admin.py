from django.contrib import admin
from .models import CompletedWork, Order

class CompletedWorkInline(admin.TabularInline):
    model = CompletedWork
    extra = 0

@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("order_number", "order_date", "car", "master", "payment_date")
    list_filter = ("order_date", "payment_date", "master")
    search_fields = ("car__license_plate", "car__vin", "car__client__full_name", "master__full_name")
    inlines = [CompletedWorkInline]

@admin.register(CompletedWork)
class CompletedWorkAdmin(admin.ModelAdmin):
    list_display = ("id", "order", "service", "master", "wheel_count", "completion_time_min", "work_total")
    list_filter = ("service", "master")
    search_fields = ("order__order_number", "service__name", "master__full_name")
