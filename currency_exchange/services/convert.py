"""Amount conversion between two currencies."""
from __future__ import annotations

from ..clients import FrankfurterClient, UpstreamError
from ..models import ConvertInput, ConvertOutput, Money
from ..utils import utc_now


async def convert(params: ConvertInput, client: FrankfurterClient) -> ConvertOutput:
    data = await client.latest(params.from_, [params.to], amount=params.amount)
    converted = data.rates.get(params.to)
    if converted is None:
        raise UpstreamError(f"missing rate for {params.to}")
    return ConvertOutput(
        original=Money(amount=params.amount, currency=params.from_),
        converted=Money(amount=converted, currency=params.to),
        rate=converted / params.amount,
        date=data.date,
        fetched_at=utc_now(),
    )
