"""
Point d'entrée principal du service de factures.

Usage:
    python -m backend

Lance uvicorn sur l'app ASGI unique (backend.asgi:app) et lit:
- HOST / PORT: interface et port d'écoute (0.0.0.0:8000 par défaut)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn et des loggers backend.* (ex: "info", "debug")
"""
import logging
import os
import uvicorn

if __name__ == "__main__":
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 8000))
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    log_level = os.environ.get("LOG_LEVEL", "info").lower()
    # Les loggers backend.* n'ont pas de handler propre: on les branche sur le root
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s:     %(name)s - %(message)s")
    uvicorn.run(
        "backend.asgi:app",
        host=host,
        port=port,
        reload=reload_flag,
        log_level=log_level,
    )
