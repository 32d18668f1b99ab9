"""Data models used across the import."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Callable

from aton_import.common.constants import UNKNOWN_UID, UNKNOWN_VERSION
from aton_import.common.time_utils import format_instant, parse_instant


@dataclass(frozen=True)
class ImportContext:
    """Attribution and changeset supplied by whoever runs the import."""

    changeset: int
    user: str | None = None
    user_id: int | None = None

    @property
    def user_name(self) -> str:
        return self.user or ""

    @property
    def uid(self) -> int:
        return self.user_id if self.user_id is not None else UNKNOWN_UID


@dataclass
class AtonEntity:
    """A seamark-tagged AtoN node, keyed by its stable external identifier."""

    identifier: str
    lat: float
    lon: float
    timestamp: datetime | None = None
    user: str = ""
    uid: int = UNKNOWN_UID
    changeset: int = -1
    version: int = UNKNOWN_VERSION
    visible: bool = True
    tags: dict[str, str] = field(default_factory=dict)

    def tag(self, key: str) -> str | None:
        return self.tags.get(key)

    def update_tag(self, key: str, value: str | None) -> None:
        """Set a tag, or remove it when the value is None."""
        if value is None:
            self.tags.pop(key, None)
        else:
            self.tags[key] = value

    def remove_tags(self, predicate: Callable[[str], bool]) -> None:
        for key in [key for key in self.tags if predicate(key)]:
            del self.tags[key]

    def copy(self, **changes: Any) -> "AtonEntity":
        changes.setdefault("tags", dict(self.tags))
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "lat": self.lat,
            "lon": self.lon,
            "timestamp": format_instant(self.timestamp),
            "user": self.user,
            "uid": self.uid,
            "changeset": self.changeset,
            "version": self.version,
            "visible": self.visible,
            "tags": dict(sorted(self.tags.items())),
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "AtonEntity":
        return cls(
            identifier=payload["identifier"],
            lat=float(payload["lat"]),
            lon=float(payload["lon"]),
            timestamp=parse_instant(payload.get("timestamp")),
            user=payload.get("user") or "",
            uid=int(payload.get("uid", UNKNOWN_UID)),
            changeset=int(payload.get("changeset", -1)),
            version=int(payload.get("version", UNKNOWN_VERSION)),
            visible=bool(payload.get("visible", True)),
            tags={key: str(value) for key, value in (payload.get("tags") or {}).items() if value is not None},
        )


@dataclass(frozen=True)
class SkipSignal:
    """Returned instead of an entity when a row is not eligible for import."""

    reason: str
    message: str
