"""
Construction pure des paramètres Checkout (pas de Stripe, pas de DB).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from backend.config import (
    INVOICE_CURRENCY,
    INVOICE_PRODUCT_NAME,
    CHECKOUT_SUCCESS_PATH,
    CHECKOUT_CANCEL_PATH,
)

# module backend.payments.checkout
def to_minor_units(amount: float) -> int:
    """
    Convertit un montant en unités (ex: 19.99 USD) en centimes pour Stripe.
    - Calcul décimal sur la représentation textuelle du float: 19.995 -> 2000 (et non 1999).
    - Arrondi "half up", comme Math.round côté navigateur.
    - to_integral_value ne dépend pas de la précision du contexte: pas d'InvalidOperation sur les gros montants.
    """
    cents = Decimal(str(amount)) * 100
    return int(cents.to_integral_value(rounding=ROUND_HALF_UP))

def to_line_items(amount: float, description: str) -> List[Dict[str, Any]]:
    """
    Une seule ligne Stripe pour une facture: quantité 1, prix en centimes, description libre.
    """
    return [{
        "quantity": 1,
        "price_data": {
            "currency": INVOICE_CURRENCY,
            "unit_amount": to_minor_units(amount),
            "product_data": {
                "name": INVOICE_PRODUCT_NAME,
                "description": description,
            },
        },
    }]

def redirect_urls(origin: str) -> Dict[str, str]:
    """
    URLs de retour Stripe dérivées de l'origine de la requête.
    {CHECKOUT_SESSION_ID} est laissé tel quel: Stripe le remplace à la redirection.
    """
    base = (origin or "").rstrip("/")
    return {
        "success_url": f"{base}{CHECKOUT_SUCCESS_PATH}",
        "cancel_url": f"{base}{CHECKOUT_CANCEL_PATH}",
    }
