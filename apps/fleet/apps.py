from django.apps import AppConfig


class FleetConfig(AppConfig):
    name = "apps.fleet"
    verbose_name = "Cars and tyres"

    def ready(self):
        from . import signals  # noqa: F401
