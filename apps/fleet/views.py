from django.contrib import messages
from django.db.models import Q
from django.shortcuts import redirect, render

from apps.core.exceptions import ConcurrencyConflict, ValidationFailed
from apps.core.views import int_param, submitted_version

from .repository import CarRepository, TireRepository

cars = CarRepository()
tires = TireRepository()

# -----------------------------
# Cars
# -----------------------------
def car_list(request):
    q = (request.GET.get("q") or "").strip()

    qs = cars.list()
    if q:
        qs = qs.filter(
            Q(license_plate__icontains=q) |
            Q(vin__icontains=q) |
            Q(brand__icontains=q) |
            Q(model__icontains=q) |
            Q(client__full_name__icontains=q)
        )

    return render(request, "fleet/car_list.html", {"cars": qs, "q": q})

def car_detail(request, pk: int):
    car = cars.get(pk)
    return render(request, "fleet/car_detail.html", {
        "car": car,
        "tires": car.tires.all(),
        "orders": car.orders.select_related("master").order_by("-order_date"),
    })

def car_create(request):
    if request.method == "POST":
        try:
            cars.create(request.POST, request.FILES)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Car created.")
            return redirect("fleet:car_list")
    else:
        initial_client = request.GET.get("client")
        form = cars.build_form()
        if initial_client:
            form.initial["client"] = initial_client

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New car",
        "cancel_url": "fleet:car_list",
    })

def car_update(request, pk: int):
    car = cars.get(pk)

    if request.method == "POST":
        try:
            cars.update(pk, request.POST, request.FILES, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This car was changed by someone else. Review and save again.")
            return redirect("fleet:car_update", pk=pk)
        else:
            messages.success(request, "Car updated.")
            return redirect("fleet:car_list")
    else:
        form = cars.build_form(instance=car)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": car,
        "title": f"Edit {car}",
        "cancel_url": "fleet:car_list",
    })

def car_delete(request, pk: int):
    if request.method == "POST":
        cars.delete(pk)
        messages.success(request, "Car deleted.")
        return redirect("fleet:car_list")

    car = cars.get(pk)
    return render(request, "crud/delete.html", {
        "obj": car,
        "cascade_note": "Tyres, orders and completed works of this car are deleted too.",
        "cancel_url": "fleet:car_list",
    })

# -----------------------------
# Tyres
# -----------------------------
def tire_list(request):
    qs = tires.list()

    car_id = int_param(request, "car")
    if car_id is not None:
        qs = qs.filter(car_id=car_id)

    return render(request, "fleet/tire_list.html", {"tires": qs, "car_id": car_id})

def tire_detail(request, pk: int):
    return render(request, "fleet/tire_detail.html", {"tire": tires.get(pk)})

def tire_create(request):
    if request.method == "POST":
        try:
            tires.create(request.POST)
        except ValidationFailed as exc:
            form = exc.form
        else:
            messages.success(request, "Tyre created.")
            return redirect("fleet:tire_list")
    else:
        form = tires.build_form()
        car_id = request.GET.get("car")
        if car_id:
            form.initial["car"] = car_id

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "create",
        "title": "New tyre",
        "cancel_url": "fleet:tire_list",
    })

def tire_update(request, pk: int):
    tire = tires.get(pk)

    if request.method == "POST":
        try:
            tires.update(pk, request.POST, version=submitted_version(request))
        except ValidationFailed as exc:
            form = exc.form
        except ConcurrencyConflict:
            messages.error(request, "This tyre was changed by someone else. Review and save again.")
            return redirect("fleet:tire_update", pk=pk)
        else:
            messages.success(request, "Tyre updated.")
            return redirect("fleet:tire_list")
    else:
        form = tires.build_form(instance=tire)

    return render(request, "crud/form.html", {
        "form": form,
        "mode": "edit",
        "obj": tire,
        "title": f"Edit {tire}",
        "cancel_url": "fleet:tire_list",
    })

def tire_delete(request, pk: int):
    if request.method == "POST":
        tires.delete(pk)
        messages.success(request, "Tyre deleted.")
        return redirect("fleet:tire_list")

    return render(request, "crud/delete.html", {
        "obj": tires.get(pk),
        "cancel_url": "fleet:tire_list",
    })
