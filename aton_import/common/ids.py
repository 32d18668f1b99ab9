"""Run and changeset identifier helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("run-%Y%m%dT%H%M%S%fZ")


def generate_changeset_id() -> int:
    # Seconds since epoch keep changesets of consecutive runs ordered.
    return int(datetime.now(tz=timezone.utc).timestamp())
