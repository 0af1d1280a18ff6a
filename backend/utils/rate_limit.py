from typing import Dict, Any
from fastapi import Request, Response, HTTPException
import logging
import os
import time

logger = logging.getLogger(__name__)

def _client_key(req: Request) -> str:
    # Pas de session: IP (après ProxyHeadersMiddleware) + chemin
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{req.url.path}"

def optional_rate_limit(times: int, seconds: int):
    """
    Dépendance FastAPI: limite `times` requêtes par fenêtre de `seconds` et par client.
    - LOCAL_RATE_LIMIT_FALLBACK=1: fenêtre glissante en mémoire (app.state._rl_store)
    - sinon fastapi-limiter (Redis) si initialisé par le lifespan
    - désactivé si app.state.rate_limit_enabled est False
    """
    async def _dep(request: Request, response: Response):
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _client_key(request)
            store = getattr(request.app.state, "_rl_store", {})
            # purge des clients dont la fenêtre est expirée
            for stale in [k for k, ts in store.items() if not ts or now - ts[-1] >= seconds]:
                del store[stale]
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        if getattr(request.app.state, "rate_limit_enabled", None) is not True:
            return

        from fastapi_limiter.depends import RateLimiter

        async def _identifier(req: Request) -> str:
            return _client_key(req)

        try:
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception as e:
            # Redis indisponible en cours de route: on laisse passer plutôt que de bloquer la création
            logger.warning("Rate limiter unavailable, request allowed: %s", e)
            return
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    backend = None
    if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
        backend = "memory"
    elif enabled:
        backend = "redis"
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "backend": backend,
    }
