"""Period parsing for signal intervals such as "60 s"."""

from __future__ import annotations

import re

PERIOD_FORMAT = re.compile(r"(\d+) *s?")


def parse_period(text: str | None) -> str | None:
    """Return the digit run of a period description, or None when it does not parse."""
    if not text or not text.strip():
        return None
    match = PERIOD_FORMAT.fullmatch(text)
    if match is None:
        return None
    return match.group(1)
