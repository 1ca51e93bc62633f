import pytest
from django.urls import reverse

from apps.clients.models import Client
from apps.staff.models import Master

pytestmark = pytest.mark.django_db


class TestPages:
    @pytest.mark.parametrize("path", [
        "/",
        "/Home/Index",
        "/Clients/",
        "/Cars/",
        "/Tires/",
        "/Masters/",
        "/Services/",
        "/Orders/",
        "/CompletedWorks/",
    ])
    def test_list_pages_render(self, client, path, work, tire):
        assert client.get(path).status_code == 200

    def test_detail_pages_render(self, client, owner, car, tire, master, service, order, work):
        urls = [
            reverse("clients:detail", args=[owner.pk]),
            reverse("fleet:car_detail", args=[car.pk]),
            reverse("fleet:tire_detail", args=[tire.pk]),
            reverse("staff:detail", args=[master.pk]),
            reverse("catalog:detail", args=[service.pk]),
            reverse("orders:order_detail", args=[order.pk]),
            reverse("orders:work_detail", args=[work.pk]),
        ]
        for url in urls:
            assert client.get(url).status_code == 200, url

    def test_missing_record_is_404(self, client):
        assert client.get("/Clients/Details/999").status_code == 404
        assert client.get("/Cars/Edit/999").status_code == 404
        assert client.get("/Orders/Delete/999").status_code == 404

    def test_dashboard_shows_counts(self, client, order):
        resp = client.get("/Home/Index")
        assert resp.context["summary"].orders_count == 1
        assert "Ivan Petrov" in resp.content.decode()

    def test_car_search(self, client, car):
        assert car in client.get("/Cars/", {"q": "camry"}).context["cars"]
        assert car not in client.get("/Cars/", {"q": "volvo"}).context["cars"]

    def test_unpaid_filter(self, client, order):
        assert order in client.get("/Orders/", {"unpaid": "1"}).context["orders"]

    def test_tire_list_filters_by_car(self, client, car, tire):
        assert tire in client.get("/Tires/", {"car": car.pk}).context["tires"]
        assert tire not in client.get("/Tires/", {"car": car.pk + 1}).context["tires"]

    def test_non_numeric_list_filters_are_ignored(self, client, tire, work):
        resp = client.get("/Tires/", {"car": "abc"})
        assert resp.status_code == 200
        assert tire in resp.context["tires"]

        resp = client.get("/CompletedWorks/", {"order": "abc"})
        assert resp.status_code == 200
        assert work in resp.context["works"]


class TestClientForms:
    def test_create_redirects_to_list(self, client):
        resp = client.post("/Clients/Create", {"full_name": "Olga Kim", "phone": "+79035556677"})

        assert resp.status_code == 302
        assert resp.url == reverse("clients:list")
        assert Client.objects.filter(full_name="Olga Kim").exists()

    def test_invalid_create_rerenders_form(self, client):
        resp = client.post("/Clients/Create", {"full_name": "", "phone": "+79035556677"})

        assert resp.status_code == 200
        assert resp.context["form"].errors["full_name"]
        assert not Client.objects.exists()

    def test_edit_form_carries_version(self, client, owner):
        resp = client.get(f"/Clients/Edit/{owner.pk}")
        assert 'name="version" value="1"' in resp.content.decode()

    def test_edit_saves(self, client, owner):
        resp = client.post(f"/Clients/Edit/{owner.pk}", {
            "full_name": "Ivan Petrov Jr",
            "phone": owner.phone,
            "version": "1",
        })
        assert resp.status_code == 302
        owner.refresh_from_db()
        assert owner.full_name == "Ivan Petrov Jr"
        assert owner.version == 2

    def test_stale_edit_is_refused(self, client, owner):
        Client.objects.filter(pk=owner.pk).update(version=2)

        resp = client.post(f"/Clients/Edit/{owner.pk}", {
            "full_name": "Lost update",
            "phone": owner.phone,
            "version": "1",
        })
        assert resp.status_code == 302
        assert resp.url == reverse("clients:update", args=[owner.pk])
        owner.refresh_from_db()
        assert owner.full_name == "Ivan Petrov"

    def test_delete_confirmation_then_delete(self, client, owner, car):
        confirm = client.get(f"/Clients/Delete/{owner.pk}")
        assert "deleted too" in confirm.content.decode()

        resp = client.post(f"/Clients/Delete/{owner.pk}")
        assert resp.status_code == 302
        assert not Client.objects.exists()

    def test_deleting_missing_client_still_redirects(self, client):
        resp = client.post("/Clients/Delete/999")
        assert resp.status_code == 302


class TestRestrictedDelete:
    def test_master_with_works_gets_409(self, client, master, work):
        resp = client.post(f"/Masters/Delete/{master.pk}")

        assert resp.status_code == 409
        assert Master.objects.filter(pk=master.pk).exists()

    def test_service_with_works_gets_409(self, client, service, work):
        resp = client.post(f"/Services/Delete/{service.pk}")
        assert resp.status_code == 409

    def test_free_master_is_deleted(self, client, master, order):
        resp = client.post(f"/Masters/Delete/{master.pk}")

        assert resp.status_code == 302
        order.refresh_from_db()
        assert order.master is None
