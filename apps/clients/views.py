from django.contrib import messages
from django.shortcuts import redirect, render

from apps.core.exceptions import ConcurrencyConflict, ValidationFailed
from apps.core.views import submitted_version

from .repository import ClientRepository

clients = ClientRepository()

def client_list(request):
    return render(request, "clients/list.html", {"clients": clients.list()})

def client_detail(request, pk: int):
    client = clients.get(pk)
    return render(request, "clients/detail.html", {
        "client": client,
        "cars": client.cars.all().order_by("brand", "model"),
    })

def client_create(request):
    if request.method == "POST":
        try:
            clients.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Client created.")
            return redirect("clients:list")
    else:
        form = clients.build_form()

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New client",
        "cancel_url": "clients:list",
    })

def client_update(request, pk: int):
    client = clients.get(pk)

    if request.method == "POST":
        try:
            clients.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This client was changed by someone else. Review and save again.")
            return redirect("clients:update", pk=pk)
        else:
            messages.success(request, "Client updated.")
            return redirect("clients:list")
    else:
        form = clients.build_form(instance=client)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": client,
        "title": f"Edit {client.full_name}",
        "cancel_url": "clients:list",
    })

def client_delete(request, pk: int):
    if request.method == "POST":
        # deleting an already-deleted client is not an error
        clients.delete(pk)
        messages.success(request, "Client deleted.")
        return redirect("clients:list")

    client = clients.get(pk)
    return render(request, "crud/delete.html", {
        "obj": client,
        "cascade_note": "All cars of this client, with their tyres, orders and completed works, are deleted too.",
        "cancel_url": "clients:list",
    })
