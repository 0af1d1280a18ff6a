# module backend.invoices.errors
from typing import Dict, List


class InvoiceError(Exception):
    """Base des erreurs métier de la feature 'invoices'."""


class InvoiceValidationError(InvoiceError):
    """Entrée invalide: details = [{"field": ..., "message": ...}, ...] (HTTP 400)."""

    def __init__(self, details: List[Dict[str, str]]):
        self.details = details
        super().__init__("; ".join(f"{d['field']}: {d['message']}" for d in details))


class PaymentProviderUnavailable(InvoiceError):
    """Le test de connectivité Stripe a échoué (clé refusée, réseau...)."""


class InvoicePersistenceError(InvoiceError):
    """Session Stripe créée mais la ligne 'invoices' n'a pas pu être écrite."""
