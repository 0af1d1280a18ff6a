# backend.config
from pathlib import Path
from urllib.parse import urlparse
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env (les variables déjà exportées gagnent)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

PUBLIC_DIR = BASE_DIR / "public"
TEMPLATES_DIR = BASE_DIR / "templates"

"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les chemins utiles (PUBLIC_DIR, TEMPLATES_DIR)
- Normalise et expose les secrets/URLs (Supabase, Stripe), CORS/hosts
- validate_env(): échoue au démarrage si la configuration obligatoire est absente ou invalide
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Supabase: URL du projet et clé serveur
# - la clé service (bypass RLS) est préférée; la clé anon reste acceptée en dev
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(
    os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or ""
)
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

INVOICES_TABLE = _clean_env(os.getenv("INVOICES_TABLE") or "invoices")

# Stripe
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_SECRET_KEY_PREFIX = "sk_"
STRIPE_API_VERSION = "2023-10-16"
INVOICE_CURRENCY = "usd"
INVOICE_PRODUCT_NAME = "Invoice Payment"

# Pages de succès/annulation du checkout (relatives à l'origine de la requête)
CHECKOUT_SUCCESS_PATH = "/success?session_id={CHECKOUT_SESSION_ID}"
CHECKOUT_CANCEL_PATH = "/cancel"

# Sécurité / CORS
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

# Proxies dont on accepte X-Forwarded-For/Proto (même variable que uvicorn)
FORWARDED_ALLOW_IPS = [h.strip() for h in os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1").split(",") if h.strip()]

# Origine par défaut si la requête n'envoie pas d'en-tête Origin
BASE_URL = _clean_env(os.getenv("BASE_URL") or "http://localhost:8000").rstrip("/")

RECENT_INVOICES_LIMIT = 10


def validate_env() -> None:
    """
    Vérifie la configuration obligatoire (appelée par le lifespan).
    Lève RuntimeError si:
      - STRIPE_SECRET_KEY, SUPABASE_URL ou SUPABASE_KEY est absent
      - la clé Stripe ne commence pas par "sk_"
      - SUPABASE_URL n'est pas une URL http(s) avec un hôte
    """
    required = {
        "STRIPE_SECRET_KEY": STRIPE_SECRET_KEY,
        "SUPABASE_URL": SUPABASE_URL,
        "SUPABASE_KEY": SUPABASE_KEY,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

    if not STRIPE_SECRET_KEY.startswith(STRIPE_SECRET_KEY_PREFIX):
        raise RuntimeError(f'Invalid Stripe secret key format. Must start with "{STRIPE_SECRET_KEY_PREFIX}"')

    parsed = urlparse(SUPABASE_URL)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise RuntimeError(f"Invalid SUPABASE_URL: {SUPABASE_URL!r} (expected https://<project>.supabase.co)")
