"""
Accès aux données pour la feature 'invoices' (table Supabase `invoices`).
"""
from typing import Any, Dict, List, Optional
import logging
# Import du module (et non des fonctions) pour rester patchable par les tests
import backend.infra.supabase_client as supabase_client
from backend.config import INVOICES_TABLE, RECENT_INVOICES_LIMIT

logger = logging.getLogger(__name__)

# module backend.invoices.repository
def insert_invoice(
    *,
    amount: float,
    client_email: str,
    description: str,
    payment_link: str,
    status: str = "pending",
) -> Optional[dict]:
    """
    Insère une facture et retourne la ligne créée (id, created_at renseignés par la base).
    - Retourne None en cas d’erreur (loggée); l’appelant décide de la réponse HTTP.
    """
    data: Dict[str, Any] = {
        "amount": amount,
        "client_email": client_email,
        "description": description,
        "payment_link": payment_link,
        "status": status,
    }
    try:
        res = (
            supabase_client.get_supabase()
            .table(INVOICES_TABLE)
            .insert(data)
            .execute()
        )
        rows = getattr(res, "data", None) or []
        return rows[0] if isinstance(rows, list) and rows else None
    except Exception:
        logger.exception("invoices.repository.insert_invoice failed client_email=%s amount=%s", client_email, amount)
        return None

def list_recent_invoices(limit: int = RECENT_INVOICES_LIMIT) -> List[dict]:
    """
    Dernières factures, de la plus récente à la plus ancienne (created_at desc).
    - Retourne [] en cas d’erreur.
    """
    try:
        res = (
            supabase_client.get_supabase()
            .table(INVOICES_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return (res.data or [])[:limit]
    except Exception:
        logger.exception("invoices.repository.list_recent_invoices failed limit=%s", limit)
        return []
