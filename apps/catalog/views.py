from django.contrib import messages
from django.shortcuts import redirect, render

from apps.core.exceptions import ConcurrencyConflict, DeleteRestricted, ValidationFailed
from apps.core.views import submitted_version

from .repository import ServiceRepository

services = ServiceRepository()

def service_list(request):
    return render(request, "catalog/list.html", {"services": services.list()})

def service_detail(request, pk: int):
    service = services.get(pk)
    return render(request, "catalog/detail.html", {
        "service": service,
        "works": service.completed_works.select_related("order", "master").order_by("-order__order_date")[:20],
    })

def service_create(request):
    if request.method == "POST":
        try:
            services.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Service created.")
            return redirect("catalog:list")
    else:
        form = services.build_form()

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New service",
        "cancel_url": "catalog:list",
    })

def service_update(request, pk: int):
    service = services.get(pk)

    if request.method == "POST":
        try:
            services.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This service was changed by someone else. Review and save again.")
            return redirect("catalog:update", pk=pk)
        else:
            messages.success(request, "Service updated.")
            return redirect("catalog:list")
    else:
        form = services.build_form(instance=service)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": service,
        "title": f"Edit {service.name}",
        "cancel_url": "catalog:list",
    })

def service_delete(request, pk: int):
    if request.method == "POST":
        try:
            services.delete(pk)
        except DeleteRestricted as exc:
            messages.error(request, "This service has completed works on record and cannot be deleted.")
            return render(request, "crud/delete.html", {"obj": exc.obj, "cancel_url": "catalog:list"}, status=409)
        messages.success(request, "Service deleted.")
        return redirect("catalog:list")

    service = services.get(pk)
    return render(request, "crud/delete.html", {
        "obj": service,
        "cancel_url": "catalog:list",
    })
