"""
Schémas d'entrée pour les colis.
Le colis reste un document libre (champs d'expédition définis par le front),
mais l'appartenance (user.email) et les champs suivis par le service sont validés.
Les valeurs validées sont conservées telles qu'envoyées: seule la colonne
created_at reçoit la forme normalisée (voir parse_created_at).
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator, model_validator

_DATETIME = TypeAdapter(datetime)


def parse_created_at(value: Any) -> datetime:
    """Interprète createdAt (ISO 8601, date seule, epoch en s ou ms); ValueError sinon."""
    try:
        return _DATETIME.validate_python(value)
    except ValidationError:
        raise ValueError(f"createdAt is not a valid timestamp: {value!r}")


class ParcelOwner(BaseModel):
    # name, uid, photo... restent libres
    model_config = ConfigDict(extra="allow")

    email: str

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return v


class ParcelCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    user: ParcelOwner
    createdAt: Any
    paymentStatus: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _default_created_at(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("createdAt") is None:
            data = {**data, "createdAt": datetime.now(timezone.utc).isoformat()}
        return data

    @field_validator("createdAt")
    @classmethod
    def _valid_created_at(cls, v: Any) -> Any:
        parse_created_at(v)
        return v

    def to_document(self) -> Dict[str, Any]:
        """Document JSON tel qu'il sera stocké (champs libres inclus)."""
        doc = self.model_dump(mode="json")
        if doc.get("paymentStatus") is None:
            doc.pop("paymentStatus", None)
        return doc
