"""
Module 'payments': point d'entrée public.
Réunit le calcul des paramètres Checkout et l'adaptateur Stripe.
"""

from .checkout import to_minor_units, to_line_items, redirect_urls
from .stripe_client import require_stripe, check_connection, create_session

__all__ = [
    # checkout
    "to_minor_units",
    "to_line_items",
    "redirect_urls",
    # stripe
    "require_stripe",
    "check_connection",
    "create_session",
]
