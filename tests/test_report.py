from __future__ import annotations

import importlib
from datetime import date

import pytest
import respx
from httpx import Response

from currency_exchange.services.report import format_change_percent

from .payloads import UPSTREAM, latest_payload, series_payload

# the package re-exports the `report` function under the submodule name
report_mod = importlib.import_module("currency_exchange.services.report")


def test_change_percent_has_explicit_sign_and_two_decimals():
    assert format_change_percent(0.05, 1.0) == "+5.00%"
    assert format_change_percent(-0.02, 0.8) == "-2.50%"
    assert format_change_percent(0.0, 0.9) == "+0.00%"
    assert format_change_percent(1.0, 3.0) == "+33.33%"


@pytest.mark.asyncio
@respx.mock
async def test_report_combines_current_rates_with_week_trend(async_client, monkeypatch):
    monkeypatch.setattr(report_mod, "utc_today", lambda: date(2024, 1, 10))

    latest = respx.get(f"{UPSTREAM}/latest").mock(
        return_value=Response(200, json=latest_payload("USD", {"EUR": 0.95, "GBP": 0.78, "JPY": 150.0}))
    )
    # keys deliberately out of order; the oldest day is the trend baseline
    series = respx.get(f"{UPSTREAM}/2024-01-03..2024-01-10").mock(
        return_value=Response(200, json=series_payload(
            "USD", "2024-01-03", "2024-01-10",
            {
                "2024-01-09": {"EUR": 0.94, "GBP": 0.79},
                "2024-01-03": {"EUR": 0.90, "GBP": 0.80},
                "2024-01-05": {"EUR": 0.92, "GBP": 0.795},
            },
        ))
    )

    r = await async_client.post(
        "/entrypoints/report/invoke",
        json={"input": {"targets": ["eur", "gbp", "jpy"]}},
    )
    assert r.status_code == 200
    out = r.json()["output"]

    assert latest.called and series.called
    assert series.calls.last.request.url.params["to"] == "EUR,GBP,JPY"

    assert out["base"] == "USD"
    assert out["currentDate"] == "2024-01-10"
    assert out["currentRates"]["EUR"] == 0.95

    eur = out["trends"]["EUR"]
    assert eur["current"] == 0.95
    assert eur["weekAgo"] == 0.90
    assert eur["change"] == 0.95 - 0.90
    assert eur["changePercent"] == "+5.56%"

    gbp = out["trends"]["GBP"]
    assert gbp["changePercent"] == "-2.50%"

    # no historical rate for JPY, so no trend
    assert "JPY" not in out["trends"]

    hist = out["history"]
    assert hist["startDate"] == "2024-01-03"
    assert hist["endDate"] == "2024-01-09"
    assert hist["dataPoints"] == 3
    assert "generatedAt" in out


@pytest.mark.asyncio
@respx.mock
async def test_report_with_empty_history_has_no_trends(async_client, monkeypatch):
    monkeypatch.setattr(report_mod, "utc_today", lambda: date(2024, 1, 10))
    respx.get(f"{UPSTREAM}/latest").mock(
        return_value=Response(200, json=latest_payload("USD", {"EUR": 0.95}))
    )
    respx.get(f"{UPSTREAM}/2024-01-03..2024-01-10").mock(
        return_value=Response(200, json=series_payload("USD", "2024-01-03", "2024-01-10", {}))
    )

    r = await async_client.post("/entrypoints/report/invoke", json={"input": {"targets": ["EUR"]}})
    out = r.json()["output"]
    assert out["trends"] == {}
    assert out["history"]["dataPoints"] == 0
    assert out["history"]["startDate"] is None


@pytest.mark.asyncio
@respx.mock
async def test_report_aborts_when_history_call_fails(async_client, monkeypatch):
    monkeypatch.setattr(report_mod, "utc_today", lambda: date(2024, 1, 10))
    respx.get(f"{UPSTREAM}/latest").mock(
        return_value=Response(200, json=latest_payload("USD", {"EUR": 0.95}))
    )
    respx.get(f"{UPSTREAM}/2024-01-03..2024-01-10").mock(return_value=Response(500))

    r = await async_client.post("/entrypoints/report/invoke", json={"input": {"targets": ["EUR"]}})
    assert r.status_code == 502
    assert r.json()["error"]["details"] == {"status": 500}
