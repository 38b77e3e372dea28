"""
Tests for account API endpoints.

These test the HTTP layer: status codes, response format, and
error mapping. Store behavior is tested under tests/services.
"""

from decimal import Decimal


def open_account(client, user_id=1, currency="USD", account_type="checking"):
    response = client.post("/accounts", json={
        "user_id": user_id,
        "account_type": account_type,
        "currency": currency,
    })
    assert response.status_code == 201
    return response.json()


class TestCreateAccount:

    def test_create_account_returns_active_account(self, client):
        data = open_account(client, user_id=5, currency="eur")

        assert data["user_id"] == 5
        assert data["currency"] == "EUR"
        assert data["status"] == "active"
        assert data["account_type"] == "checking"

    def test_missing_fields_return_422(self, client):
        response = client.post("/accounts", json={"user_id": 1})
        assert response.status_code == 422

    def test_unknown_account_type_returns_422(self, client):
        response = client.post("/accounts", json={
            "user_id": 1, "account_type": "brokerage", "currency": "USD",
        })
        assert response.status_code == 422


class TestListAccounts:

    def test_list_filters_by_user(self, client):
        open_account(client, user_id=1)
        mine = open_account(client, user_id=2)

        response = client.get("/accounts", params={"user_id": 2})

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [mine["id"]]


class TestGetAccount:

    def test_get_account_includes_balance(self, client):
        account = open_account(client)
        client.post("/deposits", json={
            "account_id": account["id"], "amount": "250.00", "currency": "USD",
        })

        response = client.get(f"/accounts/{account['id']}")

        assert response.status_code == 200
        assert Decimal(response.json()["balance"]) == Decimal("250")

    def test_new_account_has_zero_balance(self, client):
        account = open_account(client)

        response = client.get(f"/accounts/{account['id']}")

        assert Decimal(response.json()["balance"]) == Decimal("0")

    def test_nonexistent_account_returns_404(self, client):
        response = client.get("/accounts/999")

        assert response.status_code == 404
        assert response.json()["detail"]["kind"] == "not_found"


class TestAccountLedger:

    def test_ledger_lists_entries_oldest_first(self, client):
        source = open_account(client)
        destination = open_account(client)
        client.post("/deposits", json={
            "account_id": source["id"], "amount": "100", "currency": "USD",
        })
        client.post("/transfers", json={
            "source_account_id": source["id"],
            "destination_account_id": destination["id"],
            "amount": "40",
            "currency": "USD",
        })

        response = client.get(f"/accounts/{source['id']}/ledger")

        assert response.status_code == 200
        entries = response.json()
        assert [e["entry_type"] for e in entries] == ["credit", "debit"]
        assert Decimal(entries[1]["amount"]) == Decimal("40")

    def test_ledger_of_missing_account_returns_404(self, client):
        response = client.get("/accounts/999/ledger")
        assert response.status_code == 404
