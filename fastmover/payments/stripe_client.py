"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import logging
from typing import Any

import stripe

from fastmover.config import PAYMENT_CURRENCY
from fastmover.errors import UpstreamError

logger = logging.getLogger(__name__)

# module fastmover.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY.
    - Sans clé, lève UpstreamError plutôt que de laisser le SDK échouer plus loin.
    """
    from fastmover.config import STRIPE_SECRET_KEY
    if not STRIPE_SECRET_KEY:
        raise UpstreamError("STRIPE_SECRET_KEY manquant")
    stripe.api_key = STRIPE_SECRET_KEY
    return stripe

def create_payment_intent(amount: Any, currency: str = PAYMENT_CURRENCY) -> str:
    """
    Crée un PaymentIntent Stripe et renvoie son client_secret.
    - amount: montant en unités mineures (ex: 500 = 5.00 USD), transmis tel quel.
      Montant absent: UpstreamError sans appel à Stripe.
    - Pas de clé d'idempotence: un nouvel appel crée un nouvel intent.
    - Erreurs Stripe (montant invalide, auth...): UpstreamError avec le message Stripe.
    """
    if amount is None:
        raise UpstreamError("Missing required param: amount.")
    require_stripe()
    try:
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            payment_method_types=["card"],
        )
    except stripe.StripeError as e:
        message = getattr(e, "user_message", None) or str(e)
        logger.error("stripe.PaymentIntent.create failed amount=%s: %s", amount, message)
        raise UpstreamError(message) from e
    return intent["client_secret"]
