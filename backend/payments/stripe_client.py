"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import stripe
from typing import Any, Dict, List

from backend.config import STRIPE_SECRET_KEY, STRIPE_API_VERSION

# module backend.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l’emploi.
    - Configure stripe.api_key (STRIPE_SECRET_KEY) et la version d'API figée.
    - La présence et le format de la clé sont vérifiés au démarrage (backend.config.validate_env).
    """
    stripe.api_key = STRIPE_SECRET_KEY
    stripe.api_version = STRIPE_API_VERSION
    return stripe

def check_connection() -> None:
    """
    Test de connectivité: liste un moyen de paiement.
    Lève stripe.StripeError si Stripe est injoignable ou refuse la clé.
    """
    require_stripe()
    stripe.PaymentMethod.list(limit=1)

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    success_url: str,
    cancel_url: str,
    customer_email: str,
    mode: str = "payment",
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    - line_items: lignes Stripe (price_data + quantity)
    - success_url / cancel_url: URLs de redirection
    - customer_email: pré-remplit l'email du client sur la page hébergée
    Retour: dict session (ex: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."})
    """
    require_stripe()
    session = stripe.checkout.Session.create(
        payment_method_types=["card"],
        line_items=line_items,
        mode=mode,
        success_url=success_url,
        cancel_url=cancel_url,
        customer_email=customer_email,
    )
    # stripe retourne un StripeObject; on le traite comme dict-compatible
    return dict(session)
