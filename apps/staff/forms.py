from django import forms
from .models import Master

class MasterForm(forms.ModelForm):
    class Meta:
        model = Master
        fields = ["full_name", "position", "rank", "hourly_rate"]
        widgets = {
            "rank": forms.NumberInput(attrs={"min": 1, "max": 6, "step": 1}),
            "hourly_rate": forms.NumberInput(attrs={"min": 0, "step": "0.01"}),
        }
