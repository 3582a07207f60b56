import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from supabase import Client

from fastmover.errors import UpstreamError
from fastmover.infra.supabase_client import get_db
from fastmover.payments import service as payments_service
from fastmover.payments.models import PaymentIntentRequest, PaymentSuccessRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])

# module fastmover.payments.views
@router.post("/create-payment-intent")
def create_payment_intent(payload: PaymentIntentRequest):
    """
    Crée un PaymentIntent Stripe et renvoie {clientSecret} au front.
    - Entrée JSON: { "amount": <montant en cents, transmis tel quel> }
    - Erreurs: 500 {"error": "<message>"} si amount manque, si Stripe refuse ou est injoignable
    """
    try:
        client_secret = payments_service.create_payment_intent(payload.amount)
    except UpstreamError as e:
        return JSONResponse({"error": e.message}, status_code=500)
    return JSONResponse({"clientSecret": client_secret})

@router.post("/payment-success")
def payment_success(payload: PaymentSuccessRequest, db: Client = Depends(get_db)):
    """
    Enregistre un paiement réussi: colis passé en 'paid' puis insertion du paiement.
    - Requis: parcelId, user, amount (400 sinon, aucune écriture)
    - 404 si le colis n'existe pas
    - Idempotent sur transactionId
    """
    result = payments_service.record_payment_success(db, payload)
    return JSONResponse(result)

@router.get("/payments")
def list_payments(email: Optional[str] = Query(None), db: Client = Depends(get_db)):
    """Historique des paiements, les plus récents d'abord (filtrable par email)."""
    return JSONResponse(payments_service.list_payments(db, email))
