from unittest.mock import patch, MagicMock

from backend.invoices.repository import insert_invoice, list_recent_invoices


def test_insert_invoice_returns_created_row():
    # Arrange
    mock_client = MagicMock()
    mock_table = MagicMock()
    mock_insert = MagicMock()
    row = {"id": "inv-1", "status": "pending", "created_at": "2024-01-01T00:00:00+00:00"}

    mock_client.table.return_value = mock_table
    mock_table.insert.return_value = mock_insert
    mock_insert.execute.return_value = MagicMock(data=[row])

    # Act
    with patch("backend.infra.supabase_client.get_supabase", return_value=mock_client):
        result = insert_invoice(
            amount=12.5,
            client_email="client@example.com",
            description="Photos",
            payment_link="https://checkout.stripe.test/c/pay/cs_1",
        )

    # Assert
    mock_client.table.assert_called_once_with("invoices")
    mock_table.insert.assert_called_once_with({
        "amount": 12.5,
        "client_email": "client@example.com",
        "description": "Photos",
        "payment_link": "https://checkout.stripe.test/c/pay/cs_1",
        "status": "pending",
    })
    mock_insert.execute.assert_called_once()
    assert result == row


def test_insert_invoice_exception_returns_none():
    with patch("backend.infra.supabase_client.get_supabase", side_effect=Exception("Test exception")):
        result = insert_invoice(
            amount=1.0,
            client_email="client@example.com",
            description="x",
            payment_link="https://checkout.stripe.test/c/pay/cs_1",
        )
    assert result is None


def test_insert_invoice_empty_response_returns_none():
    mock_client = MagicMock()
    mock_client.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[])
    with patch("backend.infra.supabase_client.get_supabase", return_value=mock_client):
        result = insert_invoice(amount=1.0, client_email="a@example.com", description="x", payment_link="https://x")
    assert result is None


def test_list_recent_invoices_orders_by_created_at_desc_and_limits():
    mock_client = MagicMock()
    query = mock_client.table.return_value.select.return_value
    query.order.return_value.limit.return_value.execute.return_value = MagicMock(data=[{"id": "b"}, {"id": "a"}])

    with patch("backend.infra.supabase_client.get_supabase", return_value=mock_client):
        rows = list_recent_invoices()

    mock_client.table.assert_called_once_with("invoices")
    mock_client.table.return_value.select.assert_called_once_with("*")
    query.order.assert_called_once_with("created_at", desc=True)
    query.order.return_value.limit.assert_called_once_with(10)
    assert rows == [{"id": "b"}, {"id": "a"}]


def test_list_recent_invoices_error_returns_empty_list():
    # get_supabase lève par défaut en tests (fixture _no_real_supabase)
    assert list_recent_invoices() == []
