"""Latest-rate entrypoints: free overview and per-base rate lookup."""
from __future__ import annotations

from ..clients import FrankfurterClient
from ..models import OverviewInput, OverviewOutput, RatesInput, RatesOutput
from ..utils import ECB_SOURCE, utc_now

OVERVIEW_BASE = "USD"
OVERVIEW_TARGETS = ["EUR", "GBP", "JPY", "CHF", "AUD", "CAD"]


async def overview(params: OverviewInput, client: FrankfurterClient) -> OverviewOutput:
    data = await client.latest(OVERVIEW_BASE, OVERVIEW_TARGETS)
    return OverviewOutput(
        base=data.base,
        date=data.date,
        rates=data.rates,
        currencies=[OVERVIEW_BASE, *OVERVIEW_TARGETS],
        source=ECB_SOURCE,
        fetched_at=utc_now(),
    )


async def rates(params: RatesInput, client: FrankfurterClient) -> RatesOutput:
    """Latest rates for ``base``; every quoted currency when no targets are given."""
    data = await client.latest(params.base, params.targets)
    return RatesOutput(
        base=data.base,
        date=data.date,
        rates=data.rates,
        rate_count=len(data.rates),
        fetched_at=utc_now(),
    )
