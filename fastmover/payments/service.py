"""
Cas d'usage 'payments': orchestre stripe_client et les repositories colis/paiements.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from fastmover.errors import Conflict, NotFound, UpstreamError
from fastmover.parcels import repository as parcels_repository
from fastmover.payments import repository
from fastmover.payments import stripe_client
from fastmover.payments.models import PaymentSuccessRequest
from fastmover.utils.validators import ensure_uuid

logger = logging.getLogger(__name__)

PAYMENT_STATUS_PAID = "paid"



def create_payment_intent(amount: Any) -> str:
    """Crée un PaymentIntent Stripe pour un montant en unités mineures; renvoie le client secret."""
    return stripe_client.create_payment_intent(amount)

def _already_recorded(existing: Dict[str, Any], parcel_id: str, payload: PaymentSuccessRequest) -> Dict[str, Any]:
    """
    Réponse à un transactionId déjà enregistré.
    - Même colis et même montant: rejeu d'un client, 200 sans écriture.
    - Sinon: Conflict (409), le transactionId appartient à un autre paiement.
    """
    same_parcel = existing.get("parcelId") == parcel_id
    same_amount = float(existing.get("amount") or 0) == float(payload.amount)
    if not (same_parcel and same_amount):
        logger.warning(
            "payments.record_payment_success transaction_id=%s reused parcel_id=%s (recorded for parcel_id=%s)",
            payload.transactionId, parcel_id, existing.get("parcelId"),
        )
        raise Conflict("Transaction ID already used for another payment")
    logger.info(
        "payments.record_payment_success duplicate transaction_id=%s payment_id=%s",
        payload.transactionId, existing["id"],
    )
    return {"message": "Payment already recorded", "paymentId": existing["id"]}

def record_payment_success(db: Client, payload: PaymentSuccessRequest) -> Dict[str, Any]:
    """
    Enregistre un paiement confirmé côté client.
    Étapes:
      1) Valide parcelId (400 si mal formé).
      2) Si transactionId est déjà connu: 200 sans écriture pour le même colis/montant, 409 sinon.
      3) Passe le colis en 'paid' (404 si aucun colis ne correspond, rien n'est écrit).
      4) Insère le paiement avec un createdAt serveur.
    Les deux écritures ne sont pas transactionnelles: un échec en 4) laisse le colis
    marqué payé sans paiement, ce qui est journalisé pour réconciliation. Une course entre
    deux requêtes de même transactionId est arbitrée par l'index unique (traitée comme en 2).
    """
    parcel_id = ensure_uuid(payload.parcelId, "parcel ID")

    existing = repository.find_payment_by_transaction(db, payload.transactionId)
    if existing:
        return _already_recorded(existing, parcel_id, payload)

    matched = parcels_repository.update_payment_status(db, parcel_id, PAYMENT_STATUS_PAID)
    if not matched:
        raise NotFound("Parcel not found")

    doc = {
        "parcelId": parcel_id,
        "user": payload.user.model_dump(exclude_none=True),
        "amount": payload.amount,
        "transactionId": payload.transactionId,
        "paymentMethod": payload.paymentMethod,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    try:
        payment_id = repository.insert_payment(db, doc)
    except Conflict:
        # Une requête concurrente a enregistré ce transactionId entre 2) et 4)
        existing = repository.find_payment_by_transaction(db, payload.transactionId)
        if not existing:
            raise UpstreamError("Failed to record payment")
        return _already_recorded(existing, parcel_id, payload)
    except UpstreamError:
        logger.error(
            "payments.record_payment_success parcel marked paid without payment record "
            "parcel_id=%s transaction_id=%s amount=%s",
            parcel_id, payload.transactionId, payload.amount,
        )
        raise

    logger.info("payments.record_payment_success parcel_id=%s payment_id=%s", parcel_id, payment_id)
    return {"message": "Payment recorded successfully", "paymentId": payment_id}


def list_payments(db: Client, email: Optional[str] = None) -> List[dict]:
    return repository.list_payments(db, email=email)
