from typing import Optional
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from backend.utils.templates import templates
from backend.invoices import service as invoices_service

router = APIRouter(tags=["Pages"])

@router.get("/", response_class=HTMLResponse)
def dashboard_page(request: Request):
    invoices = invoices_service.recent_invoices()
    return templates.TemplateResponse(request, "index.html", {"invoices": invoices})

@router.get("/success", response_class=HTMLResponse)
def checkout_success_page(request: Request, session_id: Optional[str] = None):
    return templates.TemplateResponse(request, "success.html", {"session_id": session_id})

@router.get("/cancel", response_class=HTMLResponse)
def checkout_cancel_page(request: Request):
    return templates.TemplateResponse(request, "cancel.html", {})
