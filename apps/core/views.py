from django.shortcuts import render

from .dashboard import build_dashboard


def int_param(request, name):
    """Integer query parameter, or None when missing or not a number."""
    raw = (request.GET.get(name) or "").strip()
    try:
        return int(raw)
    except ValueError:
        return None

def submitted_version(request):
    """
    Version token posted back by an edit form, or None when the form did not
    carry one.
    """
    raw = (request.POST.get("version") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None

def dashboard(request):
    return render(request, "core/dashboard.html", {"summary": build_dashboard()})
