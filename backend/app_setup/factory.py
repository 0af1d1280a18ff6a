"""
Factory d’application utilisée par les entrypoints (backend.asgi, python -m backend).
Ordonne les étapes d’initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_force_https_middleware
from .static import mount_static_files
from .security import register_security_middleware
from .exceptions import register_exception_handlers
from .routes import register_routes
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l’app FastAPI avec le lifespan (validation de la config, rate limiting) et enregistre:
      - middlewares de base, statiques, en-têtes de sécurité
      - gestionnaires d’exceptions et routes simples
      - tous les routers (pages, API factures, health)
      - redirection HTTPS en dernier pour qu’elle s’exécute en premier
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="Invoice API", lifespan=lifespan)
    register_basic_middlewares(app)
    mount_static_files(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    register_force_https_middleware(app)
    return app
