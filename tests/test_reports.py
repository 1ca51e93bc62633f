import csv
import io

import pytest
from openpyxl import load_workbook

from apps.reports.views import ORDER_HEADERS, WORK_HEADERS

pytestmark = pytest.mark.django_db

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class TestExports:
    def test_orders_csv(self, client, order, work):
        resp = client.get("/Reports/orders.csv")

        assert resp.status_code == 200
        assert resp["Content-Type"].startswith("text/csv")
        assert 'filename="orders.csv"' in resp["Content-Disposition"]

        rows = list(csv.reader(io.StringIO(resp.content.decode("utf-8"))))
        assert rows[0] == ORDER_HEADERS
        assert rows[1][0] == str(order.order_number)
        assert rows[1][3] == "Ivan Petrov"
        assert rows[1][6] == "Unpaid"
        assert rows[1][7] == "1"

    def test_works_csv(self, client, work):
        rows = list(csv.reader(io.StringIO(client.get("/Reports/completed-works.csv").content.decode("utf-8"))))

        assert rows[0] == WORK_HEADERS
        assert rows[1][2] == "Wheel balancing"
        assert len(rows) == 2

    def test_orders_xlsx(self, client, order):
        resp = client.get("/Reports/orders.xlsx")

        assert resp["Content-Type"] == XLSX
        ws = load_workbook(io.BytesIO(resp.content)).active
        assert ws.title == "Orders"
        assert [c.value for c in ws[1]] == ORDER_HEADERS
        assert ws["A2"].value == order.order_number
        assert ws.freeze_panes == "A2"

    def test_works_xlsx(self, client, work):
        ws = load_workbook(io.BytesIO(client.get("/Reports/completed-works.xlsx").content)).active

        assert ws.title == "Completed Works"
        assert ws.max_row == 2
        assert ws["G2"].value == 2000
        assert ws["H2"].value == 2000
        assert ws["I2"].value == 500
