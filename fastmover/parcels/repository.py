"""
Accès aux données pour la feature 'parcels' (table PARCELS_TABLE).
Une ligne = colonnes promues (user_email, payment_status, created_at) + document brut (data).
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from fastmover.config import PARCELS_TABLE
from fastmover.infra.supabase_client import execute
from fastmover.parcels.models import parse_created_at
from fastmover.utils.validators import ensure_uuid

logger = logging.getLogger(__name__)

# module fastmover.parcels.repository
def to_row(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "user_email": (doc.get("user") or {}).get("email"),
        "payment_status": doc.get("paymentStatus"),
        "created_at": parse_created_at(doc.get("createdAt")).isoformat(),
        "data": doc,
    }

def from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Reconstruit le document exposé: data + id + statut de paiement courant."""
    doc = dict(row.get("data") or {})
    doc["id"] = str(row.get("id"))
    if row.get("payment_status") is not None:
        doc["paymentStatus"] = row["payment_status"]
    return doc

def list_parcels(db: Client, owner_email: Optional[str] = None) -> List[dict]:
    """
    Liste les colis, les plus récents d'abord.
    - owner_email: filtre sur user.email; sans filtre, tous les colis.
    """
    query = db.table(PARCELS_TABLE).select("*")
    if owner_email:
        query = query.eq("user_email", owner_email)
    res = execute(query.order("created_at", desc=True), "Failed to fetch parcels")
    return [from_row(r) for r in (res.data or [])]

def get_parcel(db: Client, parcel_id: str) -> Optional[dict]:
    pid = ensure_uuid(parcel_id, "parcel ID")
    res = execute(
        db.table(PARCELS_TABLE).select("*").eq("id", pid).limit(1),
        "Failed to fetch parcel",
    )
    rows = res.data or []
    return from_row(rows[0]) if rows else None

def insert_parcel(db: Client, doc: Dict[str, Any]) -> str:
    row = to_row(doc)
    res = execute(db.table(PARCELS_TABLE).insert(row), "Failed to create parcel")
    rows = res.data or []
    inserted_id = str(rows[0]["id"])
    logger.info("parcels.repository.insert_parcel id=%s owner=%s", inserted_id, row["user_email"])
    return inserted_id

def delete_parcel(db: Client, parcel_id: str) -> bool:
    """Supprime un colis; False si aucune ligne ne correspondait."""
    pid = ensure_uuid(parcel_id, "parcel ID")
    res = execute(db.table(PARCELS_TABLE).delete().eq("id", pid), "Failed to delete parcel")
    return len(res.data or []) > 0

def update_payment_status(db: Client, parcel_id: str, status: str) -> int:
    """
    Positionne payment_status sans vérifier l'état courant.
    Retour: nombre de lignes correspondantes (0 si le colis n'existe pas).
    """
    pid = ensure_uuid(parcel_id, "parcel ID")
    res = execute(
        db.table(PARCELS_TABLE).update({"payment_status": status}).eq("id", pid),
        "Failed to update parcel payment status",
    )
    return len(res.data or [])
