"""Small shared helpers."""
from __future__ import annotations

from datetime import date, datetime, timezone

ECB_SOURCE = "European Central Bank via Frankfurter API"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utc_now().date()
