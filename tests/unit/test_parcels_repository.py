import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

import fastmover.parcels.repository as repo
from fastmover.errors import InvalidArgument, UpstreamError

PID = "0b5e4c8e-3f2a-4d3b-9a43-1c2d3e4f5a6b"

class _Resp:
    def __init__(self, data=None):
        self.data = data

def _mk_client(data=None):
    # Chaque méthode du builder renvoie le même mock: db.table(...).select(...).eq(...)...execute()
    client = MagicMock()
    query = MagicMock()
    client.table.return_value = query
    for name in ("select", "insert", "update", "delete", "eq", "order", "limit"):
        getattr(query, name).return_value = query
    query.execute.return_value = _Resp(data)
    return client, query

def test_list_parcels_without_filter_orders_latest_first():
    client, query = _mk_client([{"id": PID, "data": {"title": "Box"}, "payment_status": None}])
    parcels = repo.list_parcels(client)
    client.table.assert_called_once_with("parcels")
    query.eq.assert_not_called()
    query.order.assert_called_once_with("created_at", desc=True)
    assert parcels == [{"title": "Box", "id": PID}]

def test_list_parcels_filters_on_owner_email():
    client, query = _mk_client([])
    assert repo.list_parcels(client, owner_email="a@b.com") == []
    query.eq.assert_called_once_with("user_email", "a@b.com")

def test_get_parcel_invalid_id_never_queries():
    client, _ = _mk_client()
    with pytest.raises(InvalidArgument):
        repo.get_parcel(client, "not-an-id")
    client.table.assert_not_called()

def test_get_parcel_overlays_payment_status():
    row = {"id": PID, "payment_status": "paid", "data": {"user": {"email": "a@b.com"}, "paymentStatus": "unpaid"}}
    client, query = _mk_client([row])
    parcel = repo.get_parcel(client, PID.upper())
    query.eq.assert_called_once_with("id", PID)
    assert parcel == {"id": PID, "user": {"email": "a@b.com"}, "paymentStatus": "paid"}

def test_get_parcel_missing_returns_none():
    client, _ = _mk_client([])
    assert repo.get_parcel(client, PID) is None

def test_insert_parcel_promotes_columns():
    client, query = _mk_client([{"id": PID}])
    doc = {"user": {"email": "a@b.com"}, "createdAt": "2024-01-01T00:00:00Z", "weight": 2}
    assert repo.insert_parcel(client, doc) == PID
    query.insert.assert_called_once_with({
        "user_email": "a@b.com",
        "payment_status": None,
        "created_at": "2024-01-01T00:00:00+00:00",
        "data": doc,
    })

@pytest.mark.parametrize("created_at, column", [
    (1704067200000, "2024-01-01T00:00:00+00:00"),
    ("2024-01-01", "2024-01-01T00:00:00"),
])
def test_insert_parcel_normalizes_column_only(created_at, column):
    client, query = _mk_client([{"id": PID}])
    doc = {"user": {"email": "a@b.com"}, "createdAt": created_at}
    repo.insert_parcel(client, doc)
    row = query.insert.call_args.args[0]
    assert row["created_at"] == column
    assert row["data"]["createdAt"] == created_at


def test_delete_parcel_reports_missing_row():
    client, _ = _mk_client([])
    assert repo.delete_parcel(client, PID) is False
    client, _ = _mk_client([{"id": PID}])
    assert repo.delete_parcel(client, PID) is True

def test_update_payment_status_returns_matched_count():
    client, query = _mk_client([{"id": PID}])
    assert repo.update_payment_status(client, PID, "paid") == 1
    query.update.assert_called_once_with({"payment_status": "paid"})

def test_store_failure_becomes_upstream_error():
    client, query = _mk_client()
    query.execute.side_effect = APIError({"message": "boom", "code": "500", "hint": None, "details": None})
    with pytest.raises(UpstreamError) as exc:
        repo.list_parcels(client)
    assert exc.value.message == "Failed to fetch parcels"
