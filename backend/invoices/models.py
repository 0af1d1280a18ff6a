# module backend.invoices.models
"""Modèles pydantic de la feature 'invoices'.
- InvoiceCreate: payload du formulaire (clés camelCase côté client), messages d'erreur stables.
- Invoice: ligne de la table 'invoices' (snake_case en base, camelCase en JSON).
"""
import math
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from email_validator import validate_email, EmailNotValidError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

DESCRIPTION_MAX_LENGTH = 500


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class InvoiceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: float
    client_email: str = Field(alias="clientEmail")
    description: str

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, v: Any) -> Any:
        # bool est un int en Python: on le refuse explicitement, comme les chaînes
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise PydanticCustomError("amount_type", "Amount must be a number")
        return v

    @field_validator("amount")
    @classmethod
    def _amount_positive(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise PydanticCustomError("amount_not_positive", "Amount must be greater than 0")
        return v

    @field_validator("client_email")
    @classmethod
    def _email_syntax(cls, v: str) -> str:
        # Syntaxe seule (pas de DNS); les domaines réservés RFC 6761 (.local, .invalid, .test...) restent refusés
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return v

    @field_validator("description")
    @classmethod
    def _description_length(cls, v: str) -> str:
        if len(v) < 1:
            raise PydanticCustomError("description_required", "Description is required")
        if len(v) > DESCRIPTION_MAX_LENGTH:
            raise PydanticCustomError("description_too_long", "Description too long")
        return v


class Invoice(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: Optional[Union[str, int]] = None
    amount: float
    client_email: str
    description: str
    payment_link: Optional[str] = None
    status: InvoiceStatus = InvoiceStatus.PENDING
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Invoice":
        """Construit depuis une ligne Supabase (clés snake_case)."""
        return cls.model_validate(row)

    def to_api(self) -> Dict[str, Any]:
        """Représentation JSON renvoyée aux clients (clés camelCase, dates ISO)."""
        return self.model_dump(by_alias=True, mode="json")


def validation_details(exc: ValidationError) -> List[Dict[str, str]]:
    """
    Aplatit une ValidationError pydantic en [{"field", "message"}].
    - field: premier élément de loc (alias camelCase), "body" si l'objet entier est invalide
    """
    details: List[Dict[str, str]] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        details.append({"field": field, "message": err.get("msg", "Invalid value")})
    return details
