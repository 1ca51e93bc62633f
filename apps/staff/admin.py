from django.contrib import admin
from .models import Master

@admin.register(Master)
class MasterAdmin(admin.ModelAdmin):
    list_display = ("full_name", "position", "rank", "hourly_rate")
    list_filter = ("rank", "position")
    search_fields = ("full_name", "position")
