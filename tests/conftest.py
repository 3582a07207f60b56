import copy
from typing import Any, Dict, Generator, List, Optional
from uuid import uuid4

import pytest
import stripe
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from fastmover.app_setup.factory import create_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class _Resp:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Sous-ensemble du builder PostgREST utilisé par les repositories."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._filters: List[tuple] = []
        self._order: Optional[tuple] = None
        self._limit: Optional[int] = None

    def select(self, *columns):
        self._op = "select"
        return self

    def insert(self, payload):
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload):
        self._op, self._payload = "update", payload
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _match(self, row: Dict[str, Any]) -> bool:
        return all(row.get(c) == v for c, v in self._filters)

    def execute(self):
        if (self._table, self._op) in self._db.fail_on:
            raise APIError({"message": "boom", "code": "500", "hint": None, "details": None})
        self._db.calls.append((self._table, self._op))
        rows = self._db.tables.setdefault(self._table, [])
        if self._op == "insert":
            column = self._db.unique.get(self._table)
            value = (self._payload or {}).get(column) if column else None
            if value is not None and any(r.get(column) == value for r in rows):
                raise APIError({"message": "duplicate key value violates unique constraint", "code": "23505", "hint": None, "details": None})
            row = {"id": str(uuid4()), **copy.deepcopy(self._payload)}
            rows.append(row)
            return _Resp([copy.deepcopy(row)])
        matched = [r for r in rows if self._match(r)]
        if self._op == "update":
            for r in matched:
                r.update(copy.deepcopy(self._payload))
        elif self._op == "delete":
            self._db.tables[self._table] = [r for r in rows if not self._match(r)]
        else:
            if self._order:
                column, desc = self._order
                matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
            if self._limit is not None:
                matched = matched[: self._limit]
        return _Resp([copy.deepcopy(r) for r in matched])


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[dict]] = {}
        self.calls: List[tuple] = []
        self.fail_on: set = set()
        # Index uniques du schéma (supabase/schema.sql)
        self.unique: Dict[str, str] = {"payments": "transaction_id"}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def writes(self) -> List[tuple]:
        return [c for c in self.calls if c[1] in ("insert", "update", "delete")]


@pytest.fixture()
def fake_db() -> FakeSupabase:
    return FakeSupabase()

@pytest.fixture()
def app(fake_db, monkeypatch):
    # Le lifespan ouvre le faux client au lieu de Supabase
    monkeypatch.setattr("fastmover.app_setup.lifespan.create_supabase_client", lambda: fake_db)
    return create_app()

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

# Stripe neutralisé: aucune requête réseau, les appels sont enregistrés
@pytest.fixture(autouse=True)
def stripe_calls(monkeypatch) -> List[dict]:
    calls: List[dict] = []

    def _fake_create(**kwargs):
        calls.append(kwargs)
        return {"id": "pi_test_123", "client_secret": "pi_test_123_secret_abc"}

    monkeypatch.setattr("fastmover.config.STRIPE_SECRET_KEY", "sk_test_dummy")
    monkeypatch.setattr(stripe.PaymentIntent, "create", _fake_create)
    return calls
