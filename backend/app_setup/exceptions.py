"""
Gestionnaires d’exceptions.
- HTTPException sur /api/*: JSON {error, message} aligné sur les réponses de l’API factures.
- Ailleurs: réponse JSON FastAPI standard {"detail": ...}.
"""
from http import HTTPStatus
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def api_http_errors(request: Request, exc: HTTPException):
        if request.url.path.startswith("/api/"):
            try:
                reason = HTTPStatus(exc.status_code).phrase
            except ValueError:
                reason = "Error"
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": reason, "message": str(exc.detail)},
                headers=getattr(exc, "headers", None),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
