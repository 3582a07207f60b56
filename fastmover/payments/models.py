from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class PaymentIntentRequest(BaseModel):
    # Montant en unités mineures (cents), transmis tel quel à Stripe
    amount: Any = None


class PaymentUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    uid: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class PaymentSuccessRequest(BaseModel):
    parcelId: str
    amount: Union[int, float]
    user: PaymentUser
    transactionId: Optional[str] = None
    paymentMethod: Optional[str] = None
