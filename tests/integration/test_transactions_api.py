"""Integration tests for transaction endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


def payload(account, **fields) -> dict:
    data = {
        "account_id": str(account.id),
        "amount": 4599,
        "type": "expense",
        "description": "CB SUPERMARCHÉ CARREFOUR",
        "transaction_date": "2025-03-12",
    }
    data.update(fields)
    return data


async def balance(client: AsyncClient, account) -> int:
    return (await client.get(f"/api/v1/accounts/{account.id}")).json()["balance"]


class TestCreateTransaction:
    @pytest.mark.asyncio
    async def test_auto_categorized_at_creation(self, client: AsyncClient, bank_account, categories, rules):
        response = await client.post("/api/v1/transactions", json=payload(bank_account))

        assert response.status_code == 201
        assert response.json()["category_id"] == str(categories["food"].id)

    @pytest.mark.asyncio
    async def test_higher_priority_rule_wins(self, client: AsyncClient, bank_account, categories, rules):
        response = await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, description="PAIEMENT PAR CARTE SUPERMARCHÉ"),
        )

        assert response.json()["category_id"] == str(categories["bank_fees"].id)

    @pytest.mark.asyncio
    async def test_explicit_category_not_overwritten(
        self, client: AsyncClient, bank_account, categories, rules
    ):
        response = await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, category_id=str(categories["supplies"].id)),
        )

        assert response.status_code == 201
        assert response.json()["category_id"] == str(categories["supplies"].id)

    @pytest.mark.asyncio
    async def test_income_uses_income_rules_only(self, client: AsyncClient, bank_account, categories, rules):
        response = await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, type="income", description="COTISATION FRAIS DUPONT", amount=3000),
        )

        assert response.json()["category_id"] == str(categories["dues"].id)

    @pytest.mark.asyncio
    async def test_empty_description_stays_uncategorized(self, client: AsyncClient, bank_account, rules):
        response = await client.post(
            "/api/v1/transactions", json=payload(bank_account, type="income", description="")
        )

        assert response.status_code == 201
        assert response.json()["category_id"] is None
        assert response.json()["description"] is None

    @pytest.mark.asyncio
    async def test_no_rules_leaves_uncategorized(self, client: AsyncClient, bank_account):
        response = await client.post("/api/v1/transactions", json=payload(bank_account))

        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_balance_follows_transactions(self, client: AsyncClient, bank_account):
        await client.post(
            "/api/v1/transactions", json=payload(bank_account, type="income", amount=10000)
        )
        await client.post("/api/v1/transactions", json=payload(bank_account, amount=2500))

        assert await balance(client, bank_account) == 7500

    @pytest.mark.asyncio
    async def test_non_positive_amount_rejected(self, client: AsyncClient, bank_account):
        response = await client.post("/api/v1/transactions", json=payload(bank_account, amount=0))

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_001"

    @pytest.mark.asyncio
    async def test_unknown_account(self, client: AsyncClient, setup_database):
        response = await client.post(
            "/api/v1/transactions",
            json={"account_id": str(uuid4()), "amount": 100, "transaction_date": "2025-03-12"},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "API_001"

    @pytest.mark.asyncio
    async def test_category_type_mismatch(self, client: AsyncClient, bank_account, categories):
        response = await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, category_id=str(categories["dues"].id)),
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_003"


class TestListTransactions:
    @pytest.mark.asyncio
    async def test_list_with_names_and_pagination(
        self, client: AsyncClient, bank_account, categories, rules
    ):
        await client.post("/api/v1/transactions", json=payload(bank_account, transaction_date="2025-03-01"))
        await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, description="VIREMENT LOYER", transaction_date="2025-03-02"),
        )
        await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, description="CHEQUE", transaction_date="2025-03-03"),
        )

        response = await client.get("/api/v1/transactions", params={"limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "total_pages": 2}
        assert [t["description"] for t in data["transactions"]] == ["CHEQUE", "VIREMENT LOYER"]
        assert data["transactions"][0]["account_name"] == "Compte courant"
        assert data["money"]["currency"] == "EUR"

        response = await client.get("/api/v1/transactions", params={"limit": 2, "page": 2})
        txn = response.json()["transactions"][0]
        assert txn["category_name"] == "Alimentation"

    @pytest.mark.asyncio
    async def test_filter_uncategorized(self, client: AsyncClient, bank_account, rules):
        await client.post("/api/v1/transactions", json=payload(bank_account))
        await client.post("/api/v1/transactions", json=payload(bank_account, description="CHEQUE"))

        response = await client.get("/api/v1/transactions", params={"uncategorized": "true"})

        assert [t["description"] for t in response.json()["transactions"]] == ["CHEQUE"]

    @pytest.mark.asyncio
    async def test_filter_by_type_and_dates(self, client: AsyncClient, bank_account):
        await client.post("/api/v1/transactions", json=payload(bank_account, transaction_date="2025-01-10"))
        await client.post(
            "/api/v1/transactions",
            json=payload(bank_account, type="income", transaction_date="2025-02-10"),
        )

        response = await client.get(
            "/api/v1/transactions",
            params={"type": "expense", "start_date": "2025-01-01", "end_date": "2025-01-31"},
        )

        assert response.json()["pagination"]["total"] == 1


class TestEditTransaction:
    @pytest.mark.asyncio
    async def test_patch_updates_balance(self, client: AsyncClient, bank_account):
        created = (await client.post("/api/v1/transactions", json=payload(bank_account))).json()

        response = await client.patch(
            f"/api/v1/transactions/{created['id']}", json={"amount": 1000}
        )

        assert response.status_code == 200
        assert response.json()["amount"] == 1000
        assert await balance(client, bank_account) == -1000

    @pytest.mark.asyncio
    async def test_patch_does_not_rerun_rules(self, client: AsyncClient, bank_account, categories, rules):
        created = (
            await client.post("/api/v1/transactions", json=payload(bank_account, description="CHEQUE"))
        ).json()

        response = await client.patch(
            f"/api/v1/transactions/{created['id']}", json={"description": "COURSES MARCHE"}
        )

        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_set_and_clear_category(self, client: AsyncClient, bank_account, categories):
        created = (await client.post("/api/v1/transactions", json=payload(bank_account))).json()
        url = f"/api/v1/transactions/{created['id']}/category"

        response = await client.put(url, json={"category_id": str(categories["supplies"].id)})
        assert response.json()["category_id"] == str(categories["supplies"].id)

        response = await client.put(url, json={"category_id": None})
        assert response.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_set_category_of_wrong_type(self, client: AsyncClient, bank_account, categories):
        created = (await client.post("/api/v1/transactions", json=payload(bank_account))).json()

        response = await client.put(
            f"/api/v1/transactions/{created['id']}/category",
            json={"category_id": str(categories["dues"].id)},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_003"

    @pytest.mark.asyncio
    async def test_delete_restores_balance(self, client: AsyncClient, bank_account):
        created = (await client.post("/api/v1/transactions", json=payload(bank_account))).json()

        response = await client.delete(f"/api/v1/transactions/{created['id']}")

        assert response.status_code == 204
        assert await balance(client, bank_account) == 0

        response = await client.delete(f"/api/v1/transactions/{created['id']}")
        assert response.status_code == 404
        assert response.json()["error_code"] == "API_003"
