"""Date-range rate series."""
from __future__ import annotations

from ..clients import FrankfurterClient
from ..models import HistoryInput, HistoryOutput
from ..utils import utc_now


async def history(params: HistoryInput, client: FrankfurterClient) -> HistoryOutput:
    data = await client.series(params.start_date, params.end_date, params.base, params.targets)
    return HistoryOutput(
        base=data.base,
        start_date=data.start_date,
        end_date=data.end_date,
        rates=data.rates,
        data_points=len(data.rates),
        fetched_at=utc_now(),
    )
