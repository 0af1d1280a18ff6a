from typing import Optional
from supabase import create_client, Client
from backend.config import SUPABASE_URL, SUPABASE_KEY

_supabase: Optional[Client] = None

def get_supabase() -> Client:
    """
    Client Supabase côté serveur (clé service), créé à la première utilisation.
    Le client est un simple wrapper HTTP (PostgREST): chaque requête ouvre ses propres appels.
    """
    global _supabase
    if not SUPABASE_URL or not SUPABASE_KEY:
        raise RuntimeError("SUPABASE_URL/SUPABASE_KEY manquants pour get_supabase()")
    if _supabase is None:
        _supabase = create_client(SUPABASE_URL, SUPABASE_KEY)
    return _supabase
