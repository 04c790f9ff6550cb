"""Current rates combined with a one-week trend."""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Dict

from ..clients import FrankfurterClient
from ..models import HistorySummary, ReportInput, ReportOutput, Trend
from ..utils import ECB_SOURCE, utc_now, utc_today

logger = logging.getLogger(__name__)

TREND_WINDOW = timedelta(days=7)


def format_change_percent(change: float, old_rate: float) -> str:
    percent = change / old_rate * 100
    sign = "+" if change >= 0 else ""
    return f"{sign}{percent:.2f}%"


async def report(params: ReportInput, client: FrankfurterClient) -> ReportOutput:
    current = await client.latest(params.base, params.targets)

    today = utc_today()
    series = await client.series(today - TREND_WINDOW, today, params.base, params.targets)

    dates = sorted(series.rates)
    first_date = dates[0] if dates else None
    last_date = dates[-1] if dates else None
    oldest = series.rates.get(first_date, {}) if first_date else {}

    trends: Dict[str, Trend] = {}
    for currency in params.targets:
        current_rate = current.rates.get(currency)
        old_rate = oldest.get(currency)
        if current_rate is None or old_rate is None:
            logger.info(f"No trend for {params.base}/{currency}: rate missing")
            continue
        change = current_rate - old_rate
        trends[currency] = Trend(
            current=current_rate,
            week_ago=old_rate,
            change=change,
            change_percent=format_change_percent(change, old_rate),
        )

    return ReportOutput(
        base=params.base,
        current_rates=current.rates,
        current_date=current.date,
        trends=trends,
        history=HistorySummary(
            start_date=first_date,
            end_date=last_date,
            data_points=len(dates),
            rates=series.rates,
        ),
        source=ECB_SOURCE,
        generated_at=utc_now(),
    )
