"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn -k uvicorn.workers.UvicornWorker) importe `backend.asgi:app`.
- Toute la configuration FastAPI (routes, middlewares, sécurité, statiques) est centralisée
  dans backend.app_setup.factory, ce fichier ne fait qu’exposer l’instance `app`.
"""

from backend.app_setup.factory import create_app

app = create_app()

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "backend.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
