from django import forms
from django.utils import timezone

from apps.catalog.models import Service
from apps.fleet.models import Car
from apps.staff.models import Master
from .models import CompletedWork, Order

DATETIME_FORMAT = "%Y-%m-%dT%H:%M"

class OrderForm(forms.ModelForm):
    class Meta:
        model = Order
        fields = ["order_date", "car", "master", "payment_date"]
        widgets = {
            "order_date": forms.DateTimeInput(attrs={"type": "datetime-local"}, format=DATETIME_FORMAT),
            "payment_date": forms.DateTimeInput(attrs={"type": "datetime-local"}, format=DATETIME_FORMAT),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ("order_date", "payment_date"):
            self.fields[name].input_formats = [DATETIME_FORMAT, "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d"]

        self.fields["car"].queryset = Car.objects.select_related("client").order_by("brand", "model", "license_plate")
        self.fields["car"].label_from_instance = lambda c: f"{c} - {c.client.full_name}"

        # Masters are picked alphabetically; an order may stay unassigned.
        self.fields["master"].queryset = Master.objects.order_by("full_name")
        self.fields["master"].label_from_instance = lambda m: m.select_label
        self.fields["master"].required = False

        self.fields["order_date"].required = False

    def clean_order_date(self):
        return self.cleaned_data.get("order_date") or timezone.now()


class CompletedWorkForm(forms.ModelForm):
    class Meta:
        model = CompletedWork
        fields = ["order", "service", "master", "wheel_count", "completion_time_min", "work_total"]
        widgets = {
            "wheel_count": forms.NumberInput(attrs={"min": 0, "max": 4, "step": 1}),
            "completion_time_min": forms.NumberInput(attrs={"min": 1, "max": 480, "step": 1}),
            "work_total": forms.NumberInput(attrs={"min": 0, "step": "0.01"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["order"].queryset = Order.objects.order_by("-order_number")
        self.fields["order"].label_from_instance = lambda o: str(o.order_number)
        self.fields["service"].queryset = Service.objects.order_by("name")
        self.fields["service"].label_from_instance = lambda s: s.name
        self.fields["master"].queryset = Master.objects.order_by("full_name")
        self.fields["master"].label_from_instance = lambda m: m.full_name
