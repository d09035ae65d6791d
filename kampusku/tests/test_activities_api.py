"""Tests for the activity (kegiatan) catalog API."""

from __future__ import annotations

import datetime as dt

import pytest

pytestmark = pytest.mark.integration

from kampusku.domains.activities.models import Activity
from kampusku.domains.activities.services import create_activity

SEMINAR = {
    "nama_kegiatan": "Seminar AI",
    "deskripsi": "Pengantar AI",
    "tanggal_mulai": "2025-01-01",
    "tanggal_akhir": "2025-01-10",
}


def _names(client):
    resp = client.get("/kegiatan")
    assert resp.status_code == 200
    return [item["nama_kegiatan"] for item in resp.get_json()["kegiatan"]]


class TestListActivities:
    def test_list_is_public_and_empty(self, client):
        resp = client.get("/kegiatan")
        assert resp.status_code == 200
        assert resp.get_json() == {"success": True, "kegiatan": []}

    def test_list_orders_by_start_date_desc(self, app, client):
        create_activity(name="Lama", start_date=dt.date(2024, 1, 1), end_date=dt.date(2024, 1, 2))
        create_activity(name="Baru", start_date=dt.date(2025, 6, 1), end_date=dt.date(2025, 6, 2))
        create_activity(name="Tengah", start_date=dt.date(2025, 1, 1), end_date=dt.date(2025, 1, 5))
        assert _names(client) == ["Baru", "Tengah", "Lama"]

    def test_list_item_shape(self, app, client):
        create_activity(name="Bazar", start_date=dt.date(2025, 3, 1), end_date=dt.date(2025, 3, 2))
        item = client.get("/kegiatan").get_json()["kegiatan"][0]
        assert item == {
            "id": item["id"],
            "nama_kegiatan": "Bazar",
            "deskripsi": "",
            "tanggal_mulai": "2025-03-01",
            "tanggal_akhir": "2025-03-02",
        }


class TestActivityCrud:
    def test_round_trip(self, admin_client, client):
        resp = admin_client.post("/kegiatan", json=SEMINAR)
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        assert body["message"] == "Kegiatan dibuat"
        activity_id = body["kegiatan"]["id"]
        assert "Seminar AI" in _names(client)

        updated = dict(SEMINAR, nama_kegiatan="Seminar ML")
        resp = admin_client.put(f"/kegiatan/{activity_id}", json=updated)
        assert resp.status_code == 200
        assert resp.get_json()["message"] == "Kegiatan diperbarui"
        names = _names(client)
        assert "Seminar ML" in names
        assert "Seminar AI" not in names

        resp = admin_client.delete(f"/kegiatan/{activity_id}")
        assert resp.status_code == 200
        assert resp.get_json()["message"] == "Kegiatan dihapus"
        assert _names(client) == []

    def test_create_accepts_english_field_names(self, admin_client):
        resp = admin_client.post(
            "/kegiatan",
            json={"name": "Workshop", "start": "2025-02-01", "end": "2025-02-03"},
        )
        assert resp.status_code == 200
        activity = Activity.query.one()
        assert activity.name == "Workshop"
        assert activity.description == ""

    @pytest.mark.parametrize("missing", ["nama_kegiatan", "tanggal_mulai", "tanggal_akhir"])
    def test_create_requires_fields(self, admin_client, missing):
        payload = {k: v for k, v in SEMINAR.items() if k != missing}
        resp = admin_client.post("/kegiatan", json=payload)
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Lengkapi data kegiatan"
        assert Activity.query.count() == 0

    def test_create_rejects_end_before_start(self, admin_client):
        payload = dict(SEMINAR, tanggal_mulai="2025-01-10", tanggal_akhir="2025-01-01")
        resp = admin_client.post("/kegiatan", json=payload)
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_date_range"

    def test_create_rejects_malformed_date(self, admin_client):
        resp = admin_client.post("/kegiatan", json=dict(SEMINAR, tanggal_akhir="besok"))
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_field"

    def test_update_requires_fields(self, admin_client):
        activity = create_activity(name="Bazar", start_date=dt.date(2025, 3, 1), end_date=dt.date(2025, 3, 2))
        resp = admin_client.put(f"/kegiatan/{activity.id}", json={"nama_kegiatan": ""})
        assert resp.status_code == 400
        assert Activity.query.one().name == "Bazar"

    def test_update_missing_activity_still_succeeds(self, admin_client):
        resp = admin_client.put("/kegiatan/9999", json=SEMINAR)
        assert resp.status_code == 200
        assert Activity.query.count() == 0

    def test_delete_is_idempotent(self, admin_client):
        assert admin_client.delete("/kegiatan/9999").status_code == 200


class TestActivityAuthorization:
    @pytest.fixture
    def existing(self, app):
        return create_activity(name="Seminar AI", start_date=dt.date(2025, 1, 1), end_date=dt.date(2025, 1, 10))

    def _attempt_all(self, client, activity_id):
        return [
            client.post("/kegiatan", json=dict(SEMINAR, nama_kegiatan="Baru")),
            client.put(f"/kegiatan/{activity_id}", json=dict(SEMINAR, nama_kegiatan="Diubah")),
            client.delete(f"/kegiatan/{activity_id}"),
        ]

    def test_anonymous_cannot_mutate(self, client, existing):
        before = client.get("/kegiatan").get_json()
        responses = self._attempt_all(client, existing.id)
        assert [r.status_code for r in responses] == [401, 401, 401]
        assert client.get("/kegiatan").get_json() == before

    def test_student_cannot_mutate(self, student_client, existing):
        before = student_client.get("/kegiatan").get_json()
        responses = self._attempt_all(student_client, existing.id)
        assert [r.status_code for r in responses] == [403, 403, 403]
        assert all(r.get_json()["success"] is False for r in responses)
        assert student_client.get("/kegiatan").get_json() == before
