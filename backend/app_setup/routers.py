"""
Registre central des routers.
- Pages: tableau de bord (formulaire + liste), retours Stripe /success et /cancel
- API: /api/create-invoice, /api/invoices
- Health: /health, /health/supabase
"""
from fastapi import FastAPI
from backend.invoices import pages as invoices_pages
from backend.invoices import views as invoices_views
from backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # Pages web (HTML)
    app.include_router(invoices_pages.router)
    # API
    app.include_router(invoices_views.router)
    # Health & monitoring
    app.include_router(health_router)
