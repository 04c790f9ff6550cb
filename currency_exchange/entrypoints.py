"""Entrypoint registry: what the agent exposes and what each call costs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Type

from . import services
from .clients import FrankfurterClient
from .models import (
    AgentManifest,
    CompareInput,
    ConvertInput,
    EntrypointInfo,
    EntrypointInput,
    EntrypointOutput,
    HistoryInput,
    OverviewInput,
    Price,
    RatesInput,
    ReportInput,
)
from .settings import settings

AGENT_DESCRIPTION = (
    "Live currency exchange rates and conversion. "
    "Real-time forex data from European Central Bank via Frankfurter API."
)

Handler = Callable[[EntrypointInput, FrankfurterClient], Awaitable[EntrypointOutput]]


@dataclass(frozen=True, slots=True)
class Entrypoint:
    key: str
    description: str
    price: int
    input_model: Type[EntrypointInput]
    handler: Handler

    def info(self) -> EntrypointInfo:
        return EntrypointInfo(
            key=self.key,
            description=self.description,
            price=Price(amount=self.price),
            input_schema=self.input_model.model_json_schema(by_alias=True),
        )


ENTRYPOINTS: List[Entrypoint] = [
    Entrypoint(
        key="overview",
        description="Free overview - current rates for major currencies (USD, EUR, GBP, JPY, CHF)",
        price=0,
        input_model=OverviewInput,
        handler=services.overview,
    ),
    Entrypoint(
        key="convert",
        description="Convert an amount from one currency to another",
        price=1000,
        input_model=ConvertInput,
        handler=services.convert,
    ),
    Entrypoint(
        key="rates",
        description="Get current exchange rates for specific currencies",
        price=2000,
        input_model=RatesInput,
        handler=services.rates,
    ),
    Entrypoint(
        key="history",
        description="Get historical exchange rates for a date range",
        price=3000,
        input_model=HistoryInput,
        handler=services.history,
    ),
    Entrypoint(
        key="compare",
        description="Compare exchange rates across multiple currencies with analysis",
        price=2000,
        input_model=CompareInput,
        handler=services.compare,
    ),
    Entrypoint(
        key="report",
        description="Comprehensive currency report with current rates, 7-day history, and trend analysis",
        price=5000,
        input_model=ReportInput,
        handler=services.report,
    ),
]

REGISTRY: Dict[str, Entrypoint] = {ep.key: ep for ep in ENTRYPOINTS}


def manifest() -> AgentManifest:
    return AgentManifest(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=AGENT_DESCRIPTION,
        entrypoints=[ep.info() for ep in ENTRYPOINTS],
    )
