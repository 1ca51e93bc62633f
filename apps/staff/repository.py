from apps.core.repository import Repository

from .forms import MasterForm
from .models import Master


class MasterRepository(Repository):
    model = Master
    form_class = MasterForm
    ordering = ("full_name",)
