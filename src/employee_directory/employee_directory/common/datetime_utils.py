from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DEFAULT_PAYMENT_DAY


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def default_payment_date(month: str) -> str:
    """Display date used when a salary row has no payment date: YYYY-MM -> YYYY-MM-25."""
    return f"{month}-{DEFAULT_PAYMENT_DAY:02d}"


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")
