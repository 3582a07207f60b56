"""Cas d'usage 'parcels': traduit les résultats du repository en erreurs métier (NotFound)."""
from typing import List, Optional

from supabase import Client

from fastmover.errors import NotFound
from fastmover.parcels import repository
from fastmover.parcels.models import ParcelCreate


def list_parcels(db: Client, user_email: Optional[str] = None) -> List[dict]:
    return repository.list_parcels(db, owner_email=user_email)

def get_parcel(db: Client, parcel_id: str) -> dict:
    parcel = repository.get_parcel(db, parcel_id)
    if not parcel:
        raise NotFound("Parcel not found")
    return parcel

def create_parcel(db: Client, payload: ParcelCreate) -> str:
    return repository.insert_parcel(db, payload.to_document())

def delete_parcel(db: Client, parcel_id: str) -> None:
    if not repository.delete_parcel(db, parcel_id):
        raise NotFound("Parcel not found")
