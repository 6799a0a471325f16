from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_month() -> str:
    return now_local().strftime("%Y-%m")


def parse_month(value: str) -> str:
    """Validate a YYYY-MM month string and return it normalized."""
    v = (value or "").strip()
    try:
        return datetime.strptime(v, "%Y-%m").strftime("%Y-%m")
    except ValueError:
        raise ValidationError("Invalid month (expected YYYY-MM)")
