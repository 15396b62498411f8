"""Classification of open pull requests for the triage page."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

YELLOW_DAYS = 7
RED_DAYS = 14

_DAY = datetime.timedelta(days=1)


def need_triage(updated_at: datetime.datetime | None, now: datetime.datetime) -> str:
    """``red``, ``yellow`` or ``green`` depending on how long ago the PR was updated."""
    if updated_at is None:
        return "green"
    if updated_at <= now - datetime.timedelta(days=RED_DAYS):
        return "red"
    if updated_at <= now - datetime.timedelta(days=YELLOW_DAYS):
        return "yellow"
    return "green"


def days_since_update(
    updated_at: datetime.datetime | None,
    created_at: datetime.datetime,
    now: datetime.datetime,
) -> int:
    """Whole days since the last update, or since creation if never updated."""
    delta = now - (updated_at if updated_at is not None else created_at)
    if delta >= datetime.timedelta(0):
        return delta // _DAY
    return -((-delta) // _DAY)


def label_flags(labels: Iterable[str]) -> tuple[str, bool, bool]:
    """The joined label list and whether it waits on the author or on review."""
    joined = ", ".join(labels)
    return joined, "S-waiting-on-author" in joined, "S-waiting-on-review" in joined