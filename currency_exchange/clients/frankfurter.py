"""Client for the Frankfurter API (ECB reference rates)."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..models import LatestRates, RateSeries
from ..settings import settings


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class UpstreamError(Exception):
    """Raised when the upstream API fails or answers with an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


class FrankfurterClient:
    """Single-shot async GETs against the Frankfurter API. No caching, no retries."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self._base_url = (base_url or settings.FRANKFURTER_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SEC
        self._http_client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._base_url = value.rstrip("/")

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
        return self._http_client

    async def close(self) -> None:
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    # ------------------------------------------------------------------ raw GET

    async def get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        client = await self._get_client()
        url = f"{self._base_url}{path}"
        logger.debug(f"GET {url} params={params}")
        try:
            response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning(f"Frankfurter request to {path} failed: {exc}")
            raise UpstreamError(f"API request failed: {exc}") from exc
        if not response.is_success:
            logger.warning(f"Frankfurter HTTP {response.status_code} for {path}")
            raise UpstreamError(f"API error: {response.status_code}", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"Frankfurter returned a non-JSON body for {path}")
            raise UpstreamError("API returned a malformed body", status_code=response.status_code) from exc

    def _parse(self, model: Type[RecordT], payload: Any) -> RecordT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.warning(f"Unexpected Frankfurter payload for {model.__name__}: {exc.error_count()} error(s)")
            raise UpstreamError("API returned an unexpected payload") from exc

    # ---------------------------------------------------------------- endpoints

    async def latest(
        self,
        base: str,
        targets: Optional[Iterable[str]] = None,
        *,
        amount: Optional[float] = None,
    ) -> LatestRates:
        params: Dict[str, str] = {}
        if amount is not None:
            params["amount"] = _format_amount(amount)
        params["from"] = base
        symbols = list(targets or [])
        if symbols:
            params["to"] = ",".join(symbols)
        return self._parse(LatestRates, await self.get("/latest", params))

    async def series(
        self,
        start: dt.date,
        end: dt.date,
        base: str,
        targets: Iterable[str],
    ) -> RateSeries:
        path = f"/{start.isoformat()}..{end.isoformat()}"
        params = {"from": base, "to": ",".join(targets)}
        return self._parse(RateSeries, await self.get(path, params))


frankfurter_client = FrankfurterClient()
