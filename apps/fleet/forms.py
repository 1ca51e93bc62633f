from django import forms

from apps.clients.models import Client
from .models import Car, Tire

class CarForm(forms.ModelForm):
    class Meta:
        model = Car
        fields = ["client", "brand", "model", "manufacture_year", "license_plate", "vin", "photo"]
        widgets = {
            "manufacture_year": forms.NumberInput(attrs={"min": 1900, "max": 2100, "step": 1}),
            "license_plate": forms.TextInput(attrs={"placeholder": "А123ВС777"}),
            "vin": forms.TextInput(attrs={"maxlength": 17}),
            "photo": forms.ClearableFileInput(attrs={"accept": "image/jpeg,image/png,image/gif"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["client"].queryset = Client.objects.order_by("full_name")
        self.fields["client"].label_from_instance = lambda c: c.full_name

    def clean_license_plate(self):
        return (self.cleaned_data.get("license_plate") or "").strip().upper()

    def clean_vin(self):
        return (self.cleaned_data.get("vin") or "").strip().upper()


class TireForm(forms.ModelForm):
    class Meta:
        model = Tire
        fields = [
            "car",
            "tire_type",
            "seasonality",
            "manufacturer",
            "tire_model",
            "size",
            "load_index",
            "wear_percentage",
            "pressure",
        ]
        widgets = {
            "wear_percentage": forms.NumberInput(attrs={"min": 0, "max": 100, "step": 1}),
            "pressure": forms.NumberInput(attrs={"min": 0, "max": 10, "step": "0.1"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["car"].queryset = Car.objects.order_by("brand", "model", "license_plate")
        self.fields["car"].label_from_instance = lambda c: c.full_info
