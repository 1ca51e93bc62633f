from django.contrib import messages
from django.db.models import Q
from django.shortcuts import redirect, render

from apps.core.exceptions import ConcurrencyConflict, ValidationFailed
from apps.core.views import int_param, submitted_version

from .repository import CompletedWorkRepository, OrderRepository

orders = OrderRepository()
works = CompletedWorkRepository()

# -----------------------------
# Orders
# -----------------------------
def order_list(request):
    qs = orders.list()

    q = (request.GET.get("q") or "").strip()
    unpaid = (request.GET.get("unpaid") or "").strip()

    if unpaid == "1":
        qs = qs.filter(payment_date__isnull=True)

    if q:
        qs = qs.filter(
            Q(car__license_plate__icontains=q) |
            Q(car__vin__icontains=q) |
            Q(car__client__full_name__icontains=q) |
            Q(master__full_name__icontains=q)
        )

    return render(request, "orders/order_list.html", {"orders": qs, "q": q, "unpaid": unpaid})

def order_detail(request, pk: int):
    order = orders.get(pk)
    return render(request, "orders/order_detail.html", {
        "order": order,
        "works": order.completed_works.select_related("service", "master").order_by("id"),
    })

def order_create(request):
    if request.method == "POST":
        try:
            orders.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Order created.")
            return redirect("orders:order_list")
    else:
        form = orders.build_form()
        car_id = request.GET.get("car")
        if car_id:
            form.initial["car"] = car_id

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New order",
        "cancel_url": "orders:order_list",
    })

def order_update(request, pk: int):
    order = orders.get(pk)

    if request.method == "POST":
        try:
            orders.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This order was changed by someone else. Review and save again.")
            return redirect("orders:order_update", pk=pk)
        else:
            messages.success(request, "Order updated.")
            return redirect("orders:order_list")
    else:
        form = orders.build_form(instance=order)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": order,
        "title": f"Edit {order}",
        "cancel_url": "orders:order_list",
    })

def order_delete(request, pk: int):
    if request.method == "POST":
        orders.delete(pk)
        messages.success(request, "Order deleted.")
        return redirect("orders:order_list")

    return render(request, "crud/delete.html", {
        "obj": orders.get(pk),
        "cascade_note": "Completed works of this order are deleted too.",
        "cancel_url": "orders:order_list",
    })

# -----------------------------
# Completed works
# -----------------------------
def work_list(request):
    qs = works.list()

    order_id = int_param(request, "order")
    if order_id is not None:
        qs = qs.filter(order_id=order_id)

    return render(request, "orders/work_list.html", {"works": qs, "order_id": order_id})

def work_detail(request, pk: int):
    return render(request, "orders/work_detail.html", {"work": works.get(pk)})

def work_create(request):
    if request.method == "POST":
        try:
            works.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Completed work recorded.")
            return redirect("orders:work_list")
    else:
        form = works.build_form()
        order_id = request.GET.get("order")
        if order_id:
            form.initial["order"] = order_id

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New completed work",
        "cancel_url": "orders:work_list",
    })

def work_update(request, pk: int):
    work = works.get(pk)

    if request.method == "POST":
        try:
            works.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This record was changed by someone else. Review and save again.")
            return redirect("orders:work_update", pk=pk)
        else:
            messages.success(request, "Completed work updated.")
            return redirect("orders:work_list")
    else:
        form = works.build_form(instance=work)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": work,
        "title": f"Edit {work}",
        "cancel_url": "orders:work_list",
    })

def work_delete(request, pk: int):
    if request.method == "POST":
        works.delete(pk)
        messages.success(request, "Completed work deleted.")
        return redirect("orders:work_list")

    return render(request, "crud/delete.html", {
        "obj": works.get(pk),
        "cancel_url": "orders:work_list",
    })
