import pytest
from fastapi.testclient import TestClient

from backend import config
from backend.app_setup.factory import create_app


def test_startup_fails_fast_without_stripe_key(monkeypatch):
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "")
    with pytest.raises(RuntimeError, match="STRIPE_SECRET_KEY"):
        with TestClient(create_app()):
            pass


def test_startup_fails_fast_with_publishable_key(monkeypatch):
    monkeypatch.setattr(config, "STRIPE_SECRET_KEY", "pk_test_123")
    with pytest.raises(RuntimeError, match="sk_"):
        with TestClient(create_app()):
            pass


def test_startup_disables_rate_limit_for_tests(client):
    assert client.app.state.rate_limit_enabled is False


def test_security_headers_present(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.headers["X-Frame-Options"] == "DENY"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert "default-src 'self'" in res.headers["Content-Security-Policy"]


def test_forwarded_http_is_redirected_to_https(client):
    res = client.get("/health", headers={"x-forwarded-proto": "http"}, follow_redirects=False)
    assert res.status_code == 301
    assert res.headers["location"].startswith("https://")


def test_forwarded_http_post_keeps_method_on_redirect(client):
    res = client.post(
        "/api/create-invoice", json={}, headers={"x-forwarded-proto": "http"}, follow_redirects=False
    )
    assert res.status_code == 308
    assert res.headers["location"].startswith("https://")
