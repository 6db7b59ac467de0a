from datetime import date

import pytest


async def _add(client, **overrides):
    payload = {
        "category": "Materials",
        "description": "Lumber package",
        "amount": 1250.50,
        "date": date.today().isoformat(),
        "vendor": "Capitol Lumber",
        "projectId": "kitchen-1",
        "projectName": "Kitchen Remodel",
    }
    payload.update(overrides)
    return await client.post("/api/v1/expenses", json=payload)


@pytest.mark.asyncio
async def test_add_expense(client):
    response = await _add(client)
    assert response.status_code == 201
    data = response.json()
    assert data["category"] == "Materials"
    assert data["amount"] == 1250.5
    assert data["project_id"] == "kitchen-1"
    assert len(data["id"]) == 36


@pytest.mark.asyncio
async def test_add_expense_string_amount(client):
    response = await _add(client, amount="99.99")
    assert response.status_code == 201
    assert response.json()["amount"] == 99.99


@pytest.mark.asyncio
async def test_add_expense_missing_fields(client):
    response = await client.post("/api/v1/expenses", json={"category": "Labor", "description": "Framing crew"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Category, description, and amount are required"


@pytest.mark.asyncio
async def test_add_expense_invalid_category(client):
    response = await _add(client, category="Snacks")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_add_expense_invalid_amount(client):
    response = await _add(client, amount="lots")
    assert response.status_code == 400
    response = await _add(client, amount=-5)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_and_delete_expense(client):
    first = (await _add(client)).json()
    await _add(client, category="Labor", description="Demo crew", amount=800)

    list_resp = await client.get("/api/v1/expenses")
    assert list_resp.status_code == 200
    assert len(list_resp.json()) == 2

    delete_resp = await client.delete(f"/api/v1/expenses/{first['id']}")
    assert delete_resp.status_code == 200
    assert delete_resp.json() == {"success": True}

    list_resp = await client.get("/api/v1/expenses")
    assert [e["description"] for e in list_resp.json()] == ["Demo crew"]

    again = await client.delete(f"/api/v1/expenses/{first['id']}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_expense_summary(client):
    await _add(client, amount=1000)
    await _add(client, category="Labor", amount=500, vendor="Ruiz Builders")
    await _add(client, category="Permits", amount=250, vendor=None)

    response = await client.get("/api/v1/expenses/summary")
    assert response.status_code == 200
    data = response.json()
    assert data["total_spent"] == 1750.0
    assert data["category_breakdown"] == {
        "Materials": 1000.0,
        "Labor": 500.0,
        "Permits": 250.0,
        "Subs": 0.0,
        "Misc": 0.0,
    }
    assert len(data["monthly_trend"]) == 6
    assert data["monthly_trend"][-1]["amount"] == 1750.0
    assert [v["vendor"] for v in data["top_vendors"]] == ["Capitol Lumber", "Ruiz Builders"]


@pytest.mark.asyncio
async def test_export_expenses_csv(client):
    await _add(client, date="2026-01-10", description="Tile")
    await _add(client, category="Labor", date="2026-03-02", description="Install crew", amount=600)

    response = await client.post("/api/v1/expenses/export", json={"category": "all"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "expenses.csv" in response.headers["content-disposition"]
    lines = response.text.strip().split("\n")
    assert lines[0] == "Date,Category,Description,Amount,Vendor,Project"
    assert len(lines) == 3

    filtered = await client.post(
        "/api/v1/expenses/export",
        json={"category": "Labor", "dateRange": {"start": "2026-02-01"}},
    )
    lines = filtered.text.strip().split("\n")
    assert lines[1] == "2026-03-02,Labor,Install crew,600.00,Capitol Lumber,Kitchen Remodel"
    assert len(lines) == 2
