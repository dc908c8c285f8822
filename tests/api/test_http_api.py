"""HTTP surface: status mapping, report routing and the audit trail."""

from sqlalchemy import text

API = "/api/v1"


def _create_locality(client, postal_code=1000):
    resp = client.post(f"{API}/localities", json={
        "postal_code": postal_code, "locality_name": "Palermo",
        "province_name": "Buenos Aires", "country_name": "Argentina",
    })
    assert resp.status_code == 201
    return resp.json()["id"]


def _seller_payload(locality_id, cid=10):
    return {
        "cid": cid, "company_name": "Acme", "address": "Main 1",
        "telephone": "555-0100", "locality_id": locality_id,
    }


class TestStatusMapping:

    def test_root(self, client):
        assert client.get("/").status_code == 200

    def test_create_and_fetch(self, client):
        loc_id = _create_locality(client)

        resp = client.get(f"{API}/localities/{loc_id}")

        assert resp.status_code == 200
        assert resp.json()["postal_code"] == 1000

    def test_unknown_id_is_404(self, client):
        resp = client.get(f"{API}/sellers/123")

        assert resp.status_code == 404
        assert resp.json()["code"] == "NOT_FOUND"

    def test_duplicate_is_409(self, client):
        _create_locality(client)

        resp = client.post(f"{API}/localities", json={"postal_code": 1000, "locality_name": "Again"})

        assert resp.status_code == 409
        assert resp.json()["code"] == "DUPLICATE"

    def test_missing_reference_is_409(self, client):
        resp = client.post(f"{API}/sellers", json=_seller_payload(locality_id=77))

        assert resp.status_code == 409
        assert resp.json()["code"] == "REFERENCE_MISSING"

    def test_invalid_warehouse_is_422(self, client):
        resp = client.post(f"{API}/warehouses", json={
            "address": "", "telephone": "555", "warehouse_code": "WH-1",
        })

        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_INPUT"

    def test_empty_collection_is_200(self, client):
        resp = client.get(f"{API}/sellers")

        assert resp.status_code == 200
        assert resp.json() == []

    def test_patch_returns_merged_record(self, client):
        loc_id = _create_locality(client)
        seller_id = client.post(f"{API}/sellers", json=_seller_payload(loc_id)).json()["id"]

        resp = client.patch(f"{API}/sellers/{seller_id}", json={"cid": 10, "telephone": "555-7777"})

        assert resp.status_code == 200
        assert resp.json()["telephone"] == "555-7777"
        assert resp.json()["company_name"] == "Acme"

    def test_delete_is_204_then_404(self, client):
        loc_id = _create_locality(client)

        assert client.delete(f"{API}/localities/{loc_id}").status_code == 204
        assert client.delete(f"{API}/localities/{loc_id}").status_code == 404


class TestReports:

    def test_report_route_not_shadowed_by_id_route(self, client):
        loc_id = _create_locality(client)
        client.post(f"{API}/sellers", json=_seller_payload(loc_id))

        resp = client.get(f"{API}/localities/report-sellers")

        assert resp.status_code == 200
        assert resp.json()[0]["sellers_count"] == 1

    def test_report_unknown_filter_is_404(self, client):
        resp = client.get(f"{API}/localities/report-sellers", params={"id": 99})

        assert resp.status_code == 404

    def test_zero_filter_means_every_row(self, client):
        _create_locality(client, postal_code=1000)
        _create_locality(client, postal_code=2000)

        resp = client.get(f"{API}/localities/report-sellers", params={"id": 0})

        assert resp.status_code == 200
        assert len(resp.json()) == 2


class TestStoreFailure:

    def test_broken_table_is_500(self, client, engine):
        with engine.begin() as conn:
            conn.execute(text("DROP TABLE localities"))

        resp = client.get(f"{API}/localities")

        assert resp.status_code == 500
        assert resp.json()["code"] == "PERSISTENCE_FAILURE"


class TestAuditLog:

    def test_mutations_are_logged(self, client):
        loc_id = _create_locality(client)
        client.delete(f"{API}/localities/{loc_id}")

        page = client.get(f"{API}/logs", params={"resource": "localities"}).json()

        assert page["total"] == 2
        assert {item["action"] for item in page["items"]} == {"LOCALITY_CREATE", "LOCALITY_DELETE"}

    def test_rejected_mutation_is_not_logged(self, client):
        client.post(f"{API}/sellers", json=_seller_payload(locality_id=5))

        assert client.get(f"{API}/logs").json()["total"] == 0
