from apps.core.repository import Repository

from .forms import ClientForm
from .models import Client


class ClientRepository(Repository):
    model = Client
    form_class = ClientForm
    ordering = ("full_name",)
