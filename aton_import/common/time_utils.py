"""UTC-focused helpers for run metadata and entity timestamps."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def format_instant(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


def parse_instant(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)
