"""
Middlewares transverses de l’application.
- register_basic_middlewares: CORS, TrustedHost et confiance en X-Forwarded-*.
- register_force_https_middleware: force la redirection HTTPS (utile derrière proxy).
Note: l’ordre d’ajout est important, le middleware HTTPS est ajouté en dernier pour s’exécuter en premier.
"""
from fastapi import Request, FastAPI
from fastapi.responses import RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from backend.config import CORS_ORIGINS, ALLOWED_HOSTS, FORWARDED_ALLOW_IPS

def register_basic_middlewares(app: FastAPI) -> None:
    """
    Ajoute les middlewares « de base »:
    - CORSMiddleware: autorise les origines définies (dev/prod).
    - TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
    - ProxyHeadersMiddleware: en-têtes x-forwarded-* acceptés uniquement depuis FORWARDED_ALLOW_IPS,
      sinon un client choisirait son IP (et donc sa clé de rate limit).
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=ALLOWED_HOSTS + ["*"] if "*" in CORS_ORIGINS else ALLOWED_HOSTS,
    )
    # Render, Nginx, etc.: renseigner FORWARDED_ALLOW_IPS avec l'adresse du proxy
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=FORWARDED_ALLOW_IPS)

def register_force_https_middleware(app: FastAPI) -> None:
    """
    Force la redirection HTTP -> HTTPS lorsqu’un proxy place x-forwarded-proto=http.
    - GET/HEAD: 301
    - autres méthodes: 308, le navigateur renvoie alors le même POST (corps inclus)
    """
    @app.middleware("http")
    async def force_https(request: Request, call_next):
        if request.headers.get("x-forwarded-proto") == "http":
            url = str(request.url.replace(scheme="https"))
            status_code = 301 if request.method in ("GET", "HEAD") else 308
            return RedirectResponse(url, status_code=status_code)
        return await call_next(request)
