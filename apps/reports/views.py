import csv
import io

from django.http import HttpResponse
from django.utils import timezone

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from apps.orders.models import CompletedWork, Order

ORDER_HEADERS = ["Order #", "Order Date", "Car", "Client", "Master", "Payment Date", "Payment Status", "Works"]
WORK_HEADERS = [
    "Work #", "Order #", "Service", "Master", "Wheels",
    "Time, min", "Total", "Hourly Rate", "Cost per Wheel",
]


def _fmt_dt(value) -> str:
    if not value:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime("%Y-%m-%d %H:%M")


def _order_rows():
    qs = (
        Order.objects
        .select_related("car", "car__client", "master")
        .prefetch_related("completed_works")
        .order_by("-order_date", "-order_number")
    )
    for o in qs:
        yield [
            o.order_number,
            _fmt_dt(o.order_date),
            str(o.car),
            o.car.client.full_name,
            o.master.full_name if o.master_id else "",
            _fmt_dt(o.payment_date),
            o.payment_status,
            len(o.completed_works.all()),
        ]


def _work_rows():
    qs = (
        CompletedWork.objects
        .select_related("order", "service", "master")
        .order_by("-order__order_date", "id")
    )
    for w in qs:
        yield [
            w.pk,
            w.order_id,
            w.service.name,
            w.master.full_name,
            w.wheel_count,
            w.completion_time_min,
            float(w.work_total),
            float(w.hourly_rate),
            float(w.cost_per_wheel),
        ]


def _csv_response(filename: str, headers: list[str], rows) -> HttpResponse:
    resp = HttpResponse(content_type="text/csv; charset=utf-8")
    resp["Content-Disposition"] = f'attachment; filename="{filename}"'
    w = csv.writer(resp)
    w.writerow(headers)
    for r in rows:
        w.writerow(r)
    return resp


def _xlsx_response(wb: Workbook, filename: str) -> HttpResponse:
    bio = io.BytesIO()
    wb.save(bio)

    resp = HttpResponse(
        bio.getvalue(),
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    resp["Content-Disposition"] = f'attachment; filename="{filename}"'
    return resp


def _autosize_columns(ws):
    for col in range(1, ws.max_column + 1):
        widest = max(
            (len(str(c.value)) for c in ws[get_column_letter(col)] if c.value is not None),
            default=0,
        )
        ws.column_dimensions[get_column_letter(col)].width = min(max(10, widest + 2), 50)


def _workbook(title: str, headers: list[str], rows) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = title
    ws.append(headers)

    bold = Font(bold=True)
    for cell in ws[1]:
        cell.font = bold
        cell.alignment = Alignment(vertical="center")

    for r in rows:
        ws.append(r)

    ws.freeze_panes = "A2"
    _autosize_columns(ws)
    return wb


def export_orders_csv(request):
    return _csv_response("orders.csv", ORDER_HEADERS, _order_rows())

def export_orders_xlsx(request):
    return _xlsx_response(_workbook("Orders", ORDER_HEADERS, _order_rows()), "orders.xlsx")

def export_works_csv(request):
    return _csv_response("completed_works.csv", WORK_HEADERS, _work_rows())

def export_works_xlsx(request):
    return _xlsx_response(_workbook("Completed Works", WORK_HEADERS, _work_rows()), "completed_works.xlsx")
