# module backend.invoices.views

"""Endpoints de la feature Factures.
- POST /api/create-invoice: valide, crée la session Stripe Checkout, enregistre la facture (rate-limité).
- GET /api/invoices: les 10 dernières factures en JSON.
Toutes les erreurs sont interceptées ici, loggées, et converties en JSON {error, message|details}.
"""
from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool
import logging

import stripe

from backend.config import BASE_URL
from backend.utils.rate_limit import optional_rate_limit
from backend.invoices import service as invoices_service
from backend.invoices.errors import InvoiceValidationError, PaymentProviderUnavailable

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Invoices API"])


def request_origin(request: Request) -> str:
    """Origine utilisée pour les URLs de retour Stripe: en-tête Origin, sinon BASE_URL."""
    return (request.headers.get("origin") or BASE_URL).rstrip("/")


@router.post("/create-invoice", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def create_invoice(request: Request):
    """Crée une facture payable.
    - Entrée JSON: {"amount": <number>, "clientEmail": "<email>", "description": "<1..500>"}
    - 200: {"success": true, "invoice": {...}, "paymentUrl": "<url Stripe>"}
    - 400: {"error": "Validation error", "details": [{"field", "message"}]}
    - Erreur Stripe: statut Stripe, {"error": "Stripe error", "message", "code"}
    - 500: {"error": "Server error", "message"}
    """
    try:
        try:
            body = await request.json()
        except ValueError:
            raise InvoiceValidationError([{"field": "body", "message": "Invalid JSON body"}])

        # appels Stripe/Supabase bloquants: hors de la boucle d'événements
        result = await run_in_threadpool(invoices_service.create_invoice, body, origin=request_origin(request))
        return JSONResponse({
            "success": True,
            "invoice": result["invoice"].to_api(),
            "paymentUrl": result["payment_url"],
        })
    except InvoiceValidationError as e:
        logger.warning("Invoice validation failed: %s", e)
        return JSONResponse(status_code=400, content={"error": "Validation error", "details": e.details})
    except PaymentProviderUnavailable as e:
        logger.exception("Stripe configuration error")
        return JSONResponse(
            status_code=500,
            content={"error": "Stripe configuration error", "message": str(e)},
        )
    except stripe.StripeError as e:
        logger.exception("Stripe error while creating invoice")
        return JSONResponse(
            status_code=e.http_status or 500,
            content={
                "error": "Stripe error",
                "message": e.user_message or str(e) or "Stripe payment processing error",
                "code": e.code,
            },
        )
    except Exception as e:
        logger.exception("Error creating invoice")
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "message": str(e) or "An unexpected error occurred"},
        )


@router.get("/invoices")
def list_invoices():
    """Les dernières factures (10 max), plus récentes d'abord."""
    invoices = invoices_service.recent_invoices()
    return {"invoices": [i.to_api() for i in invoices]}
