from django import forms
from .models import Client

class ClientForm(forms.ModelForm):
    class Meta:
        model = Client
        fields = ["full_name", "phone"]
        widgets = {
            "phone": forms.TextInput(attrs={"placeholder": "+79991234567", "autocomplete": "tel"}),
        }
