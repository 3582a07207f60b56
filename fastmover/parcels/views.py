# module fastmover.parcels.views
"""Endpoints API des colis.
- Listing (filtrable par propriétaire), lecture, création et suppression.
- Gestion d'erreurs: 400 id mal formé ou corps invalide, 404 introuvable, 500 échec Supabase
  (les exceptions métier sont rendues par le gestionnaire global).
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from supabase import Client

from fastmover.infra.supabase_client import get_db
from fastmover.parcels import service as parcels_service
from fastmover.parcels.models import ParcelCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/parcels", tags=["Parcels API"])


@router.get("")
def list_parcels(
    user_email: Optional[str] = Query(None, alias="userEmail"),
    db: Client = Depends(get_db),
):
    """Liste les colis, les plus récents d'abord.
    - userEmail (optionnel): ne renvoie que les colis de ce propriétaire.
    """
    return JSONResponse(parcels_service.list_parcels(db, user_email))

@router.get("/{parcel_id}")
def get_parcel(parcel_id: str, db: Client = Depends(get_db)):
    """Récupère un colis par son identifiant (400 si id invalide, 404 si absent)."""
    return JSONResponse(parcels_service.get_parcel(db, parcel_id))

@router.post("", status_code=201)
def create_parcel(payload: ParcelCreate, db: Client = Depends(get_db)):
    """Crée un colis.
    - Le corps doit être un objet JSON avec user.email; les autres champs sont conservés tels quels.
    - createdAt est renseigné par le serveur s'il est absent.
    """
    inserted_id = parcels_service.create_parcel(db, payload)
    return JSONResponse({"insertedId": inserted_id}, status_code=201)

@router.delete("/{parcel_id}")
def delete_parcel(parcel_id: str, db: Client = Depends(get_db)):
    """Supprime un colis (400 si id invalide, 404 si absent)."""
    parcels_service.delete_parcel(db, parcel_id)
    logger.info("parcels.delete id=%s", parcel_id)
    return JSONResponse({"message": "Parcel deleted successfully"})
