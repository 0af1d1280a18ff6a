import stripe

from backend.payments import stripe_client


def test_check_connection_lists_one_payment_method(monkeypatch):
    calls = []

    def fake_list(**params):
        calls.append(params)
        return {"data": []}

    monkeypatch.setattr(stripe.PaymentMethod, "list", fake_list)
    stripe_client.check_connection()
    assert calls == [{"limit": 1}]
    assert stripe.api_key == "sk_test_dummy"
    assert stripe.api_version == "2023-10-16"


def test_create_session_builds_card_checkout(monkeypatch):
    captured = {}

    def fake_create(**params):
        captured.update(params)
        return {"id": "cs_test_1", "url": "https://checkout.stripe.test/c/pay/cs_test_1"}

    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)
    line_items = [{"quantity": 1, "price_data": {"currency": "usd", "unit_amount": 500, "product_data": {"name": "Invoice Payment"}}}]
    session = stripe_client.create_session(
        line_items=line_items,
        success_url="http://localhost:8000/success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="http://localhost:8000/cancel",
        customer_email="client@example.com",
    )
    assert session == {"id": "cs_test_1", "url": "https://checkout.stripe.test/c/pay/cs_test_1"}
    assert captured["mode"] == "payment"
    assert captured["payment_method_types"] == ["card"]
    assert captured["customer_email"] == "client@example.com"
    assert captured["line_items"] == line_items
    assert captured["cancel_url"] == "http://localhost:8000/cancel"
