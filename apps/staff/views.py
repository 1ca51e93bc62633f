from django.contrib import messages
from django.shortcuts import redirect, render

from apps.core.exceptions import ConcurrencyConflict, DeleteRestricted, ValidationFailed
from apps.core.views import submitted_version

from .repository import MasterRepository

masters = MasterRepository()

def master_list(request):
    return render(request, "staff/list.html", {"masters": masters.list()})

def master_detail(request, pk: int):
    master = masters.get(pk)
    return render(request, "staff/detail.html", {
        "master": master,
        "orders": master.orders.select_related("car").order_by("-order_date"),
        "works": master.completed_works.select_related("service", "order").order_by("-order__order_date"),
    })

def master_create(request):
    if request.method == "POST":
        try:
            masters.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Master created.")
            return redirect("staff:list")
    else:
        form = masters.build_form()

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New master",
        "cancel_url": "staff:list",
    })

def master_update(request, pk: int):
    master = masters.get(pk)

    if request.method == "POST":
        try:
            masters.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This master was changed by someone else. Review and save again.")
            return redirect("staff:update", pk=pk)
        else:
            messages.success(request, "Master updated.")
            return redirect("staff:list")
    else:
        form = masters.build_form(instance=master)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": master,
        "title": f"Edit {master.full_name}",
        "cancel_url": "staff:list",
    })

def master_delete(request, pk: int):
    if request.method == "POST":
        try:
            masters.delete(pk)
        except DeleteRestricted as exc:
            messages.error(request, "This master has completed works on record and cannot be deleted.")
            return render(request, "crud/delete.html", {"obj": exc.obj, "cancel_url": "staff:list"}, status=409)
        messages.success(request, "Master deleted.")
        return redirect("staff:list")

    master = masters.get(pk)
    return render(request, "crud/delete.html", {
        "obj": master,
        "cascade_note": "Orders assigned to this master stay, without a master.",
        "cancel_url": "staff:list",
    })
