"""Current time as a dependency, so handlers can be pinned in tests."""

from datetime import date, datetime

from fastapi import Depends


def get_now() -> datetime:
    return datetime.now()


def get_today(now: datetime = Depends(get_now)) -> date:
    return now.date()
