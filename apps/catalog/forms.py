from django import forms
from .models import Service

class ServiceForm(forms.ModelForm):
    class Meta:
        model = Service
        fields = ["name", "cost"]
        widgets = {
            "cost": forms.NumberInput(attrs={"min": 0, "step": "0.01"}),
        }
