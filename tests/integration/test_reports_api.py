"""Integration tests for report endpoints."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient


@pytest.fixture
async def activity(client: AsyncClient, bank_account, categories, rules):
    """Income and expenses over the last few days plus one old expense."""
    today = date.today()
    entries = [
        (10000, "income", "COTISATION ANNUELLE", today - timedelta(days=3)),
        (2500, "expense", "CB SUPERMARCHÉ", today - timedelta(days=2)),
        (500, "expense", "FRAIS TENUE DE COMPTE", today - timedelta(days=2)),
        (1000, "expense", "CHEQUE 12", today - timedelta(days=1)),
        (9999, "expense", "CB SUPERMARCHÉ", today - timedelta(days=90)),
    ]
    for amount, txn_type, description, day in entries:
        response = await client.post(
            "/api/v1/transactions",
            json={
                "account_id": str(bank_account.id),
                "amount": amount,
                "type": txn_type,
                "description": description,
                "transaction_date": day.isoformat(),
            },
        )
        assert response.status_code == 201
    return today


@pytest.mark.asyncio
async def test_summary(client: AsyncClient, activity):
    response = await client.get("/api/v1/reports/summary", params={"days": 30})

    assert response.status_code == 200
    data = response.json()
    assert data["total_income"] == 10000
    assert data["total_expenses"] == 4000
    assert data["balance"] == 6000
    assert data["transaction_count"] == 4
    assert data["average_transaction"] == 3500
    assert data["money"] == {"currency": "EUR", "minor_unit": 2}


@pytest.mark.asyncio
async def test_summary_empty_period(client: AsyncClient, setup_database):
    data = (await client.get("/api/v1/reports/summary")).json()

    assert data["days"] == 30
    assert data["transaction_count"] == 0
    assert data["average_transaction"] == 0


@pytest.mark.asyncio
async def test_evolution_running_balance(client: AsyncClient, activity):
    data = (await client.get("/api/v1/reports/evolution", params={"days": 7})).json()

    assert [p["cumulative_balance"] for p in data["points"]] == [10000, 7000, 6000]
    assert data["points"][1]["expenses"] == 3000


@pytest.mark.asyncio
async def test_category_breakdown(client: AsyncClient, activity):
    data = (await client.get("/api/v1/reports/categories", params={"days": 30})).json()

    assert [(c["category"], c["total"]) for c in data["categories"]] == [
        ("Cotisations", 10000),
        ("Alimentation", 2500),
        ("Uncategorized", 1000),
        ("Frais bancaires", 500),
    ]


@pytest.mark.asyncio
async def test_account_type_balances(client: AsyncClient, activity):
    data = (await client.get("/api/v1/reports/account-types")).json()

    assert data["balances"] == {"bank": 10000 - 2500 - 500 - 1000 - 9999}


@pytest.mark.asyncio
async def test_invalid_days(client: AsyncClient, setup_database):
    response = await client.get("/api/v1/reports/summary", params={"days": 0})

    assert response.status_code == 400
    assert response.json()["error_code"] == "VAL_001"
