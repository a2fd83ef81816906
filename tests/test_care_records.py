# =============================================================================
# tests/test_care_records.py - Feedings, medical history, daily activities
# =============================================================================
# The three record types share one contract, so most cases run for each.
# =============================================================================

import pytest

from tests.conftest import API

KINDS = {
    "feeding": {
        "body": {"type": "dry", "description": "kibble", "quantity": 1.5},
        "update": {"quantity": 2.0},
        "label": "Feeding",
        "plural": "feedings",
    },
    "medical_history": {
        "body": {"type": "vaccine", "description": "rabies"},
        "update": {"description": "rabies booster"},
        "label": "Medical history",
        "plural": "medical history records",
    },
    "daily_activity": {
        "body": {"type": "walk", "duration": 30, "notes": "park"},
        "update": {"duration": 45},
        "label": "Daily activity",
        "plural": "daily activities",
    },
}


@pytest.fixture(params=sorted(KINDS))
def kind(request):
    return request.param


@pytest.fixture
def pet(create_user, create_pet):
    return create_pet(create_user()["id"])


def _create(client, kind, pet_id, date, **overrides):
    resp = client.post(f"{API}/{kind}", json={"pet_id": pet_id, **KINDS[kind]["body"], "date": date, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


class TestCreate:
    def test_create_returns_record_without_timestamps(self, client, kind, pet):
        record = _create(client, kind, pet["id"], "2025-04-01")

        assert record["id"] == 1
        assert record["pet_id"] == pet["id"]
        assert record["date"] == "2025-04-01"
        for field, value in KINDS[kind]["body"].items():
            assert record[field] == value
        assert "created_at" not in record
        assert "updated_at" not in record

    def test_unknown_pet_is_rejected(self, client, store, kind):
        resp = client.post(f"{API}/{kind}", json={"pet_id": 404, **KINDS[kind]["body"], "date": "2025-04-01"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Referenced pet_id does not exist."}

    def test_invalid_date_is_rejected(self, client, kind, pet):
        resp = client.post(f"{API}/{kind}", json={"pet_id": pet["id"], **KINDS[kind]["body"], "date": "2025-02-30"})

        assert resp.status_code == 400
        assert resp.json()["details"][0]["field"] == "date"


class TestList:
    def test_list_returns_pet_snapshot_and_records(self, client, kind, pet):
        first = _create(client, kind, pet["id"], "2025-04-10")
        second = _create(client, kind, pet["id"], "2025-04-01")

        resp = client.get(f"{API}/{kind}/pet/{pet['id']}")

        assert resp.status_code == 200
        body = resp.json()
        assert body["data"] == [first, second]
        assert body["pet"]["id"] == pet["id"]
        assert body["pet"]["name"] == "Rex"
        assert "created_at" not in body["pet"]

    def test_pet_without_records_differs_from_missing_pet(self, client, kind, pet):
        empty = client.get(f"{API}/{kind}/pet/{pet['id']}")
        missing = client.get(f"{API}/{kind}/pet/{pet['id'] + 1}")

        assert empty.status_code == missing.status_code == 404
        assert empty.json() == {"error": f"No {KINDS[kind]['plural']} found for this pet."}
        assert missing.json() == {"error": "Pet not found."}

    def test_records_of_other_pets_are_excluded(self, client, kind, pet, create_pet):
        owner_id = client.get(f"{API}/pet/{pet['id']}").json()["data"]["user_id"]
        other = create_pet(owner_id, name="Luna")
        _create(client, kind, other["id"], "2025-04-01")
        mine = _create(client, kind, pet["id"], "2025-04-02")

        resp = client.get(f"{API}/{kind}/pet/{pet['id']}")

        assert resp.json()["data"] == [mine]


class TestListByDates:
    def test_range_is_inclusive(self, client, kind, pet):
        early = _create(client, kind, pet["id"], "2025-04-01")
        _create(client, kind, pet["id"], "2025-04-10")
        edge = _create(client, kind, pet["id"], "2025-04-05")

        resp = client.get(
            f"{API}/{kind}/pet/date/{pet['id']}",
            params={"startDate": "2025-04-01", "endDate": "2025-04-05"},
        )

        assert resp.status_code == 200
        assert resp.json()["data"] == [early, edge]

    def test_feeding_example_from_two_dates(self, client, pet):
        april_first = _create(client, "feeding", pet["id"], "2025-04-01")
        _create(client, "feeding", pet["id"], "2025-04-10")

        resp = client.get(
            f"{API}/feeding/pet/date/{pet['id']}",
            params={"startDate": "2025-04-01", "endDate": "2025-04-05"},
        )

        assert resp.json()["data"] == [april_first]

    def test_nothing_in_range_is_not_found(self, client, kind, pet):
        _create(client, kind, pet["id"], "2025-04-10")

        resp = client.get(
            f"{API}/{kind}/pet/date/{pet['id']}",
            params={"startDate": "2025-01-01", "endDate": "2025-01-31"},
        )

        assert resp.status_code == 404
        assert resp.json() == {
            "error": f"No {KINDS[kind]['plural']} found for this pet in the selected date range."
        }

    def test_both_dates_are_required(self, client, kind, pet):
        resp = client.get(f"{API}/{kind}/pet/date/{pet['id']}", params={"startDate": "2025-01-01"})

        assert resp.status_code == 400
        assert resp.json()["details"][0]["field"] == "endDate"

    def test_dates_must_parse(self, client, kind, pet):
        resp = client.get(
            f"{API}/{kind}/pet/date/{pet['id']}",
            params={"startDate": "first of april", "endDate": "2025-04-05"},
        )

        assert resp.status_code == 400

    def test_reversed_range_matches_nothing(self, client, kind, pet):
        _create(client, kind, pet["id"], "2025-04-03")

        resp = client.get(
            f"{API}/{kind}/pet/date/{pet['id']}",
            params={"startDate": "2025-04-05", "endDate": "2025-04-01"},
        )

        assert resp.status_code == 404
        assert "in the selected date range" in resp.json()["error"]


class TestUpdate:
    def test_update_merges_supplied_fields_only(self, client, kind, pet):
        record = _create(client, kind, pet["id"], "2025-04-01")

        resp = client.put(f"{API}/{kind}/{record['id']}", json=KINDS[kind]["update"])

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data == {**record, **KINDS[kind]["update"]}

    def test_missing_record_is_not_found(self, client, kind):
        resp = client.put(f"{API}/{kind}/5", json=KINDS[kind]["update"])

        assert resp.status_code == 404
        assert resp.json() == {"error": f"{KINDS[kind]['label']} not found."}


class TestDelete:
    def test_delete_returns_confirmation_not_data(self, client, kind, pet):
        record = _create(client, kind, pet["id"], "2025-04-01")

        resp = client.delete(f"{API}/{kind}/{record['id']}")

        assert resp.status_code == 200
        assert resp.json() == {"data": f"{KINDS[kind]['label']} deleted."}

    def test_missing_record_is_not_found(self, client, kind):
        resp = client.delete(f"{API}/{kind}/5")

        assert resp.status_code == 404
        assert resp.json() == {"error": f"{KINDS[kind]['label']} not found."}

    def test_deleting_pet_cascades(self, client, kind, pet):
        _create(client, kind, pet["id"], "2025-04-01")

        client.delete(f"{API}/pet/{pet['id']}")

        resp = client.get(f"{API}/{kind}/pet/{pet['id']}")
        assert resp.json() == {"error": "Pet not found."}
