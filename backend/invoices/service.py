"""
Cas d'usage 'invoices': orchestre validation, Stripe et repository.
"""
from typing import Any, Dict, List
import logging

import stripe
from pydantic import ValidationError

from backend.config import RECENT_INVOICES_LIMIT
from backend.payments import checkout
from backend.payments import stripe_client
from . import repository
from .errors import InvoiceValidationError, PaymentProviderUnavailable, InvoicePersistenceError
from .models import Invoice, InvoiceCreate, InvoiceStatus, validation_details

logger = logging.getLogger(__name__)

def parse_invoice_payload(payload: Any) -> InvoiceCreate:
    """
    Valide le JSON reçu.
    Lève InvoiceValidationError avec le détail par champ; Stripe n'est jamais appelé dans ce cas.
    """
    try:
        return InvoiceCreate.model_validate(payload)
    except ValidationError as e:
        raise InvoiceValidationError(validation_details(e))

def create_invoice(payload: Any, origin: str) -> Dict[str, Any]:
    """
    Crée une facture payable:
      1) valide le payload
      2) vérifie la connectivité Stripe
      3) crée la session Checkout (montant en centimes, URLs dérivées de origin)
      4) insère la ligne 'invoices' (status=pending, payment_link=session.url)
    Retour: {"invoice": <Invoice>, "payment_url": <str>}
    Erreurs: InvoiceValidationError, PaymentProviderUnavailable, stripe.StripeError,
    InvoicePersistenceError. Aucune compensation si l'insert échoue après la création de session.
    """
    data = parse_invoice_payload(payload)

    try:
        stripe_client.check_connection()
    except stripe.StripeError as e:
        logger.error("Stripe connection test failed: %s", e)
        raise PaymentProviderUnavailable("Unable to connect to Stripe. Please check your configuration.") from e

    session = stripe_client.create_session(
        line_items=checkout.to_line_items(data.amount, data.description),
        customer_email=data.client_email,
        **checkout.redirect_urls(origin),
    )
    payment_url = session.get("url")
    if not payment_url:
        raise RuntimeError("Failed to generate Stripe checkout session URL")

    row = repository.insert_invoice(
        amount=data.amount,
        client_email=data.client_email,
        description=data.description,
        payment_link=payment_url,
        status=InvoiceStatus.PENDING.value,
    )
    if not row:
        raise InvoicePersistenceError(f"Invoice could not be saved (checkout session {session.get('id')})")

    invoice = Invoice.from_row(row)
    logger.info("invoices.create id=%s amount=%s session=%s", invoice.id, invoice.amount, session.get("id"))
    return {"invoice": invoice, "payment_url": payment_url}

def recent_invoices(limit: int = RECENT_INVOICES_LIMIT) -> List[Invoice]:
    """Dernières factures (au plus `limit`), plus récentes d'abord."""
    rows = repository.list_recent_invoices(limit)
    invoices = [Invoice.from_row(r) for r in rows[:limit]]
    # created_at desc, lignes sans date en dernier
    dated = sorted((i for i in invoices if i.created_at), key=lambda i: i.created_at, reverse=True)
    return dated + [i for i in invoices if not i.created_at]
