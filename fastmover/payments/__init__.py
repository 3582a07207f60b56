"""
Module 'payments' (feature-first): point d'entrée public.
Réunit client Stripe, repository BD et services.
"""

from .stripe_client import require_stripe, create_payment_intent
from .repository import insert_payment, list_payments, find_payment_by_transaction
from .service import PAYMENT_STATUS_PAID, record_payment_success

__all__ = [
    # stripe
    "require_stripe",
    "create_payment_intent",
    # repository
    "insert_payment",
    "list_payments",
    "find_payment_by_transaction",
    # services
    "PAYMENT_STATUS_PAID",
    "record_payment_success",
]
