"""Side-by-side comparison of several currencies against one base."""
from __future__ import annotations

from ..clients import FrankfurterClient
from ..models import CompareInput, CompareOutput, ComparisonEntry
from ..utils import utc_now


async def compare(params: CompareInput, client: FrankfurterClient) -> CompareOutput:
    """Rates plus inverses, with the extremes picked out.

    A rate is units of the currency per one unit of base, so the highest rate
    marks the weakest currency and the lowest rate the strongest.
    """
    data = await client.latest(params.base, params.currencies)
    comparison = [
        ComparisonEntry(currency=currency, rate=rate, inverse=1 / rate)
        for currency, rate in data.rates.items()
    ]
    ranked = sorted(comparison, key=lambda entry: entry.rate, reverse=True)
    return CompareOutput(
        base=data.base,
        date=data.date,
        comparison=comparison,
        strongest=ranked[-1] if ranked else None,
        weakest=ranked[0] if ranked else None,
        fetched_at=utc_now(),
    )
