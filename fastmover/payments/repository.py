"""
Accès aux données pour la feature 'payments' (table PAYMENTS_TABLE).
Les lignes sont stockées en snake_case et exposées en camelCase.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from fastmover.config import PAYMENTS_TABLE
from fastmover.infra.supabase_client import execute

logger = logging.getLogger(__name__)

# module fastmover.payments.repository
def to_row(doc: Dict[str, Any]) -> Dict[str, Any]:
    user = doc.get("user") or {}
    return {
        "parcel_id": doc.get("parcelId"),
        "user": user,
        "user_email": user.get("email"),
        "amount": doc.get("amount"),
        "transaction_id": doc.get("transactionId"),
        "payment_method": doc.get("paymentMethod"),
        "created_at": doc.get("createdAt"),
    }

def from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    payment = {
        "id": str(row.get("id")),
        "parcelId": row.get("parcel_id"),
        "user": row.get("user") or {},
        "amount": row.get("amount"),
        "transactionId": row.get("transaction_id"),
        "createdAt": row.get("created_at"),
    }
    if row.get("payment_method") is not None:
        payment["paymentMethod"] = row["payment_method"]
    return payment

def insert_payment(db: Client, doc: Dict[str, Any]) -> str:
    res = execute(db.table(PAYMENTS_TABLE).insert(to_row(doc)), "Failed to record payment")
    rows = res.data or []
    return str(rows[0]["id"])

def list_payments(db: Client, email: Optional[str] = None) -> List[dict]:
    """
    Liste les paiements, les plus récents d'abord.
    - email: filtre sur l'email du snapshot utilisateur.
    """
    query = db.table(PAYMENTS_TABLE).select("*")
    if email:
        query = query.eq("user_email", email)
    res = execute(query.order("created_at", desc=True), "Failed to fetch payments")
    return [from_row(r) for r in (res.data or [])]

def find_payment_by_transaction(db: Client, transaction_id: str) -> Optional[dict]:
    if not transaction_id:
        return None
    res = execute(
        db.table(PAYMENTS_TABLE).select("*").eq("transaction_id", transaction_id).limit(1),
        "Failed to fetch payment",
    )
    rows = res.data or []
    return from_row(rows[0]) if rows else None
