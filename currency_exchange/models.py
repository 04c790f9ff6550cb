"""Pydantic models for currency_exchange."""
from __future__ import annotations

import datetime as dt
import re
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
)
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------- envelopes

class ErrorCode(str, Enum):
    BAD_INPUT = "BAD_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    source: str = "currency_exchange"
    retriable: bool = False
    details: Optional[Dict[str, Any]] = None


class ErrEnvelope(BaseModel):
    ok: bool = False
    error: ErrorBody
    ts: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))


# ------------------------------------------------------------ input helpers

CurrencyCode = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_upper=True, pattern=r"^[A-Za-z]{3}$"),
]

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _check_iso_date(value: Any) -> Any:
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise ValueError("date must be formatted as YYYY-MM-DD")
    return value


IsoDate = Annotated[dt.date, BeforeValidator(_check_iso_date)]


class EntrypointInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class OverviewInput(EntrypointInput):
    pass


class ConvertInput(EntrypointInput):
    amount: float = Field(gt=0, allow_inf_nan=False)
    from_: CurrencyCode = Field(alias="from")
    to: CurrencyCode


class RatesInput(EntrypointInput):
    base: CurrencyCode = "USD"
    targets: Optional[List[CurrencyCode]] = None


class HistoryInput(EntrypointInput):
    base: CurrencyCode = "USD"
    targets: List[CurrencyCode] = Field(min_length=1)
    start_date: IsoDate = Field(alias="startDate")
    end_date: IsoDate = Field(alias="endDate")


class CompareInput(EntrypointInput):
    base: CurrencyCode = "USD"
    currencies: List[CurrencyCode] = Field(min_length=2, max_length=10)


class ReportInput(EntrypointInput):
    base: CurrencyCode = "USD"
    targets: List[CurrencyCode] = Field(min_length=1, max_length=5)


# ---------------------------------------------------------- upstream records

Rate = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class LatestRates(BaseModel):
    """Body of ``GET /latest`` (optionally with ``amount``)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    amount: Optional[float] = None
    base: str
    date: dt.date
    rates: Dict[str, Rate]


class RateSeries(BaseModel):
    """Body of ``GET /{start}..{end}``; rates keyed by business day."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    amount: Optional[float] = None
    base: str
    start_date: dt.date
    end_date: dt.date
    rates: Dict[dt.date, Dict[str, Rate]]


# ------------------------------------------------------------------ outputs

class EntrypointOutput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OverviewOutput(EntrypointOutput):
    base: str
    date: dt.date
    rates: Dict[str, float]
    currencies: List[str]
    source: str
    fetched_at: dt.datetime


class Money(EntrypointOutput):
    amount: float
    currency: str


class ConvertOutput(EntrypointOutput):
    original: Money
    converted: Money
    rate: float
    date: dt.date
    fetched_at: dt.datetime


class RatesOutput(EntrypointOutput):
    base: str
    date: dt.date
    rates: Dict[str, float]
    rate_count: int
    fetched_at: dt.datetime


class HistoryOutput(EntrypointOutput):
    base: str
    start_date: dt.date
    end_date: dt.date
    rates: Dict[dt.date, Dict[str, float]]
    data_points: int
    fetched_at: dt.datetime


class ComparisonEntry(EntrypointOutput):
    currency: str
    rate: float
    inverse: float


class CompareOutput(EntrypointOutput):
    base: str
    date: dt.date
    comparison: List[ComparisonEntry]
    strongest: Optional[ComparisonEntry] = None
    weakest: Optional[ComparisonEntry] = None
    fetched_at: dt.datetime


class Trend(EntrypointOutput):
    current: float
    week_ago: float
    change: float
    change_percent: str


class HistorySummary(EntrypointOutput):
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    data_points: int
    rates: Dict[dt.date, Dict[str, float]]


class ReportOutput(EntrypointOutput):
    base: str
    current_rates: Dict[str, float]
    current_date: dt.date
    trends: Dict[str, Trend]
    history: HistorySummary
    source: str
    generated_at: dt.datetime


# ----------------------------------------------------------------- manifest

class Price(BaseModel):
    amount: int = Field(ge=0)


class EntrypointInfo(BaseModel):
    key: str
    description: str
    price: Price
    input_schema: Dict[str, Any]


class AgentManifest(BaseModel):
    name: str
    version: str
    description: str
    entrypoints: List[EntrypointInfo]
