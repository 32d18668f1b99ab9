"""Bearing parsing for "360°" orientations and "20°-280°" sectors."""

from __future__ import annotations

import re

SECTOR_FORMAT = re.compile(r"(?P<start>\d+)°-?(?P<end>\d+)?°?")


def parse_sectors(text: str | None) -> list[str]:
    """Return ``[start, end]`` for a sector, ``[start]`` for an orientation, else ``[]``.

    The pattern is searched for anywhere in the text, so leading notes such as
    "ca. 120°" still yield a bearing.
    """
    if not text or not text.strip():
        return []
    match = SECTOR_FORMAT.search(text)
    if match is None:
        return []
    start = match.group("start")
    end = match.group("end")
    if end and end.strip():
        return [start, end]
    return [start]
