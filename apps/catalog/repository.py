from apps.core.repository import Repository

from .forms import ServiceForm
from .models import Service


class ServiceRepository(Repository):
    model = Service
    form_class = ServiceForm
    ordering = ("name",)
