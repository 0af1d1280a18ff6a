import os

# Configuration de test: doit précéder tout import de backend.config
os.environ["STRIPE_SECRET_KEY"] = "sk_test_dummy"
os.environ["SUPABASE_URL"] = "https://example.supabase.co"
os.environ["SUPABASE_SERVICE_KEY"] = "service-key-for-tests"
os.environ["DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS"] = "1"
os.environ.pop("LOCAL_RATE_LIMIT_FALLBACK", None)

import pytest
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Generator, List
from uuid import uuid4
from fastapi.testclient import TestClient

from backend.app_setup.factory import create_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid or nodeid.startswith("tests/unit/"):
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid or nodeid.startswith("tests/integration/"):
            item.add_marker(pytest.mark.integration)


class FakeInvoiceTable:
    """Table 'invoices' en mémoire: created_at croissant d'une minute à chaque insert."""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self._clock = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def insert_invoice(self, *, amount, client_email, description, payment_link, status="pending"):
        self._clock += timedelta(minutes=1)
        row = {
            "id": str(uuid4()),
            "amount": amount,
            "client_email": client_email,
            "description": description,
            "payment_link": payment_link,
            "status": status,
            "created_at": self._clock.isoformat(),
        }
        self.rows.append(row)
        return dict(row)

    def list_recent_invoices(self, limit=10):
        return sorted(self.rows, key=lambda r: r["created_at"], reverse=True)[:limit]


class FakeStripe:
    """Remplace backend.payments.stripe_client: enregistre les appels, aucune requête réseau."""

    def __init__(self):
        self.connection_checks = 0
        self.sessions: List[Dict[str, Any]] = []
        self.connection_error = None
        self.session_error = None
        self.session_url = "https://checkout.stripe.test/c/pay/cs_test_{n}"

    def check_connection(self):
        self.connection_checks += 1
        if self.connection_error:
            raise self.connection_error

    def create_session(self, **kwargs):
        if self.session_error:
            raise self.session_error
        self.sessions.append(kwargs)
        n = len(self.sessions)
        url = self.session_url.format(n=n) if self.session_url else None
        return {"id": f"cs_test_{n}", "url": url}


@pytest.fixture(autouse=True)
def _no_real_supabase(monkeypatch):
    """Aucun test ne doit joindre Supabase: le client lève une erreur si rien n'est mocké."""
    def _unavailable():
        raise RuntimeError("Supabase is not available in tests")
    monkeypatch.setattr("backend.infra.supabase_client.get_supabase", _unavailable)

@pytest.fixture
def invoice_table(monkeypatch) -> FakeInvoiceTable:
    table = FakeInvoiceTable()
    monkeypatch.setattr("backend.invoices.repository.insert_invoice", table.insert_invoice)
    monkeypatch.setattr("backend.invoices.repository.list_recent_invoices", table.list_recent_invoices)
    return table

@pytest.fixture
def fake_stripe(monkeypatch) -> FakeStripe:
    fake = FakeStripe()
    monkeypatch.setattr("backend.payments.stripe_client.check_connection", fake.check_connection)
    monkeypatch.setattr("backend.payments.stripe_client.create_session", fake.create_session)
    return fake

@pytest.fixture()
def app():
    return create_app()

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
