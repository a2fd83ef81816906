# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment defaults before the app is imported, and replaces the
# record SQL helpers (core.records) with an in-memory store so the API can be
# exercised end to end without Postgres.
# =============================================================================

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-for-reset-tokens")
os.environ.setdefault("FRONTEND_URL", "http://frontend.test")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from core import mailer, records
from core.errors import ValidationFailedError
from daily_activities.repository import DAILY_ACTIVITIES
from feedings.repository import FEEDINGS
from main import app
from medical_history.repository import MEDICAL_HISTORIES
from pets.repository import PETS
from users.repository import USERS

API = "/api/v1"


# =============================================================================
# In-memory store
# =============================================================================

class FakeStore:
    """
    Same contract as core.records: unique emails/phones, foreign keys that must
    point at an existing parent, and ON DELETE CASCADE from parent to children.
    """

    UNIQUE = {"users": ("email", "phone")}
    PARENT = {"pets": "users", "feedings": "pets", "medical_histories": "pets", "daily_activities": "pets"}

    def __init__(self, tables):
        self.tables = {t.name: t for t in tables}
        self.rows = {name: {} for name in self.tables}
        self._next_id = {name: 1 for name in self.tables}

    def _check(self, table, payload, *, record_id=None):
        for column in self.UNIQUE.get(table.name, ()):
            if column not in payload:
                continue
            for other in self.rows[table.name].values():
                if other["id"] != record_id and other[column] == payload[column]:
                    raise ValidationFailedError(f"{column.capitalize()} is already registered.")

        if table.parent_column and table.parent_column in payload:
            if payload[table.parent_column] not in self.rows[self.PARENT[table.name]]:
                raise ValidationFailedError(f"Referenced {table.parent_column} does not exist.")

    async def insert(self, table, values):
        payload = table.writable(values)
        self._check(table, payload)
        now = datetime.now(timezone.utc)
        record_id = self._next_id[table.name]
        self._next_id[table.name] += 1
        row = {"id": record_id, **{c: payload.get(c) for c in table.columns}}
        row.update(created_at=now, updated_at=now)
        self.rows[table.name][record_id] = row
        return dict(row)

    async def get(self, table, record_id):
        row = self.rows[table.name].get(record_id)
        return dict(row) if row is not None else None

    async def find_one(self, table, column, value):
        for row in self.rows[table.name].values():
            if row[column] == value:
                return dict(row)
        return None

    async def update(self, table, record_id, values):
        row = self.rows[table.name].get(record_id)
        if row is None:
            return None
        payload = table.writable(values)
        if payload:
            self._check(table, payload, record_id=record_id)
            row.update(payload)
            row["updated_at"] = datetime.now(timezone.utc)
        return dict(row)

    async def delete(self, table, record_id):
        if self.rows[table.name].pop(record_id, None) is None:
            return False
        self._cascade(table.name, record_id)
        return True

    def _cascade(self, parent_name, parent_id):
        for child in self.tables.values():
            if self.PARENT.get(child.name) != parent_name:
                continue
            doomed = [rid for rid, row in self.rows[child.name].items() if row[child.parent_column] == parent_id]
            for rid in doomed:
                del self.rows[child.name][rid]
                self._cascade(child.name, rid)

    async def list_by_parent(self, table, parent_id, *, start_date=None, end_date=None):
        rows = [row for row in self.rows[table.name].values() if row[table.parent_column] == parent_id]
        if start_date is not None and end_date is not None:
            rows = [row for row in rows if start_date <= row["date"] <= end_date]
        return [dict(row) for row in sorted(rows, key=lambda r: r["id"])]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store(monkeypatch):
    fake = FakeStore([USERS, PETS, FEEDINGS, MEDICAL_HISTORIES, DAILY_ACTIVITIES])
    for name in ("insert", "get", "find_one", "update", "delete", "list_by_parent"):
        monkeypatch.setattr(records, name, getattr(fake, name))
    return fake


@pytest.fixture
def sent_emails(monkeypatch):
    """Captures reset emails instead of talking to SMTP."""
    sent = []

    async def fake_send(to, reset_url, *, expire_minutes):
        sent.append({"to": to, "reset_url": reset_url, "expire_minutes": expire_minutes})

    monkeypatch.setattr(mailer, "send_reset_email", fake_send)
    return sent


@pytest.fixture
def client(store, sent_emails):
    # Not used as a context manager: the lifespan (DB pool, SMTP check) stays off.
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def user_payload():
    return {
        "name": "Lucas",
        "surname": "Fernández Luna",
        "email": "lucas@example.com",
        "phone": "600111222",
        "birthday": "1990-05-17",
        "password": "s3cret-pass",
    }


@pytest.fixture
def create_user(client, user_payload):
    def _create(**overrides):
        resp = client.post(f"{API}/user", json={**user_payload, **overrides})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create


@pytest.fixture
def pet_payload():
    return {
        "name": "Rex",
        "breed": "Lab",
        "gender": "male",
        "weight": 20.0,
        "birthday": "2020-01-01",
        "photo": "http://x/y.jpg",
    }


@pytest.fixture
def create_pet(client, pet_payload):
    def _create(user_id, **overrides):
        resp = client.post(f"{API}/pet", json={"user_id": user_id, **pet_payload, **overrides})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create
